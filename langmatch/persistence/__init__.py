"""
Profile persistence for the langmatch admin CLI.
"""

try:
    from .storage import ProfileFormatError, profiles_from_dict, load_profiles, save_profiles
except ImportError:
    from persistence.storage import ProfileFormatError, profiles_from_dict, load_profiles, save_profiles

__all__ = ["ProfileFormatError", "profiles_from_dict", "load_profiles", "save_profiles"]
