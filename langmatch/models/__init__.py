"""
Data models for the langmatch compatibility engine.
"""

try:
    from .language import LanguageSkill, ProficiencyLevel, language_name
    from .preferences import (
        Gender,
        GenderPreference,
        LocationPreference,
        RelationshipIntent,
        TravelDestination,
        MatchingPreferences,
    )
    from .user import GeoPoint, UserProfile
    from .result import MatchType, MatchedLanguagePair, MatchResult
except ImportError:
    from models.language import LanguageSkill, ProficiencyLevel, language_name
    from models.preferences import (
        Gender,
        GenderPreference,
        LocationPreference,
        RelationshipIntent,
        TravelDestination,
        MatchingPreferences,
    )
    from models.user import GeoPoint, UserProfile
    from models.result import MatchType, MatchedLanguagePair, MatchResult

__all__ = [
    "LanguageSkill",
    "ProficiencyLevel",
    "language_name",
    "Gender",
    "GenderPreference",
    "LocationPreference",
    "RelationshipIntent",
    "TravelDestination",
    "MatchingPreferences",
    "GeoPoint",
    "UserProfile",
    "MatchType",
    "MatchedLanguagePair",
    "MatchResult",
]
