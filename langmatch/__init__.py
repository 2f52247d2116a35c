"""
langmatch - candidate compatibility engine for a language-exchange app.

Decides whether two users may be shown to each other (hard filters) and,
if so, how well they fit (weighted score with human-readable reasons), then
ranks a discovery feed. Pure and stateless: profiles in, results out.
"""

from .config import (
    SCORE_CAP,
    NEUTRAL_AGE_POINTS,
    NEUTRAL_DISTANCE_POINTS,
    COUNTRY_NAMES,
    LANGUAGE_NAMES,
)

from .models import (
    LanguageSkill,
    ProficiencyLevel,
    language_name,
    Gender,
    GenderPreference,
    LocationPreference,
    RelationshipIntent,
    TravelDestination,
    MatchingPreferences,
    GeoPoint,
    UserProfile,
    MatchType,
    MatchedLanguagePair,
    MatchResult,
)

from .matching import (
    is_compatible,
    classify_match,
    matched_language_pair,
    can_match,
    score,
    compute_score_components,
    rank,
    find_matches,
    default_country_name,
    haversine_km,
)

from .persistence import ProfileFormatError, load_profiles, save_profiles

__version__ = "1.0.0"

__all__ = [
    # Config
    "SCORE_CAP",
    "NEUTRAL_AGE_POINTS",
    "NEUTRAL_DISTANCE_POINTS",
    "COUNTRY_NAMES",
    "LANGUAGE_NAMES",
    # Models
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
    # Engine
    "is_compatible",
    "classify_match",
    "matched_language_pair",
    "can_match",
    "score",
    "compute_score_components",
    "rank",
    "find_matches",
    "default_country_name",
    "haversine_km",
    # Persistence
    "ProfileFormatError",
    "load_profiles",
    "save_profiles",
]
