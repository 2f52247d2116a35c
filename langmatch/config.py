"""
Configuration constants for the langmatch compatibility engine.
"""

from __future__ import annotations

import os
from typing import Dict, List, Optional, Tuple

# =====================================================
# Profile Persistence (CLI only, the engine does no I/O)
# =====================================================

PROFILES_FILE = os.environ.get("LANGMATCH_PROFILES_FILE", "langmatch_profiles.json")

# =====================================================
# Logging / Verbosity
# =====================================================

LOG_LEVEL = os.environ.get("LANGMATCH_LOG_LEVEL", "WARNING").upper()
VERBOSE = os.environ.get("LANGMATCH_VERBOSE", "1").strip().lower() not in ("0", "false", "no", "off")

# =====================================================
# Ranking Concurrency
# =====================================================

# Pools at least this large are filtered and scored on a thread pool
PARALLEL_THRESHOLD: int = int(os.environ.get("LANGMATCH_PARALLEL_THRESHOLD", "256"))
MAX_WORKERS: int = int(os.environ.get("LANGMATCH_MAX_WORKERS", "0")) or min(32, (os.cpu_count() or 1) + 4)

# =====================================================
# Preference Defaults
# =====================================================

DEFAULT_MIN_AGE: int = 18
DEFAULT_MAX_AGE: int = 80

# Legacy location presets -> distance caps (km)
LOCATION_PRESET_DISTANCES: Dict[str, int] = {
    "local_25km": 25,
    "regional_100km": 100,
}
# Legacy "my country" preset -> specific_countries with the owner's own country
LOCATION_PRESET_HOME_COUNTRY = "country"

# =====================================================
# Reason Strings
# =====================================================

REASON_PERFECT_EXCHANGE = "Perfect language exchange match!"
REASON_SAME_LANGUAGE = "Learning the same language"
REASON_SIMILAR_PROFICIENCY = "Similar proficiency level"
REASON_SIMILAR_AGE = "Similar age"
REASON_CLOSE_AGE = "Close in age"
REASON_LOCAL = "Local match"
REASON_NEARBY = "Nearby"
REASON_INTENT: Dict[str, str] = {
    "open_to_dating": "Both open to dating",
    "friendship": "Both looking for friendship",
    "language_practice_only": "Both focused on language practice",
}
REASON_TRAVELING_TO_THEM = "You're traveling to their area"
REASON_TRAVELING_TO_YOU = "They're traveling to your area"
REASON_REGIONAL = "Native speaker from your preferred region"

# =====================================================
# Scoring Weights (max points per factor)
# =====================================================

SCORE_CAP: int = 100

LANGUAGE_PRIMARY_POINTS: int = 40
LANGUAGE_SECONDARY_POINTS: int = 25

PROFICIENCY_MAX_POINTS: int = 15
PROFICIENCY_STEP_PENALTY: int = 5
PROFICIENCY_SIMILAR_MAX_DIFF: int = 1

# (max abs age difference, points, reason); first band that fits wins, past the last band -> 0
AGE_BANDS: List[Tuple[int, int, Optional[str]]] = [
    (3, 10, REASON_SIMILAR_AGE),
    (5, 8, None),
    (10, 5, REASON_CLOSE_AGE),
    (15, 2, None),
]

# (max distance km, points, reason); past the last band -> DISTANCE_FAR_POINTS
DISTANCE_BANDS: List[Tuple[float, int, Optional[str]]] = [
    (25.0, 10, REASON_LOCAL),
    (100.0, 8, REASON_NEARBY),
    (500.0, 5, None),
]
DISTANCE_FAR_POINTS: int = 2

INTENT_POINTS: Dict[str, int] = {
    "open_to_dating": 10,
    "friendship": 8,
    "language_practice_only": 5,
}
# Highest priority first
INTENT_PRIORITY: List[str] = ["open_to_dating", "friendship", "language_practice_only"]

GENDER_POINTS: int = 5
TRAVEL_POINTS: int = 5
TRAVEL_CAP: int = 5
REGIONAL_POINTS: int = 5
REGIONAL_CAP: int = 5

# =====================================================
# Neutral Scores for Missing Data
# =====================================================

NEUTRAL_AGE_POINTS: int = 5  # either age unknown
NEUTRAL_DISTANCE_POINTS: int = 5  # both "anywhere", or coordinates missing

# =====================================================
# Geography
# =====================================================

EARTH_RADIUS_KM: float = 6371.0

COUNTRY_NAMES: Dict[str, str] = {
    "AR": "Argentina",
    "AT": "Austria",
    "AU": "Australia",
    "BE": "Belgium",
    "BR": "Brazil",
    "CA": "Canada",
    "CH": "Switzerland",
    "CL": "Chile",
    "CN": "China",
    "CO": "Colombia",
    "DE": "Germany",
    "EG": "Egypt",
    "ES": "Spain",
    "FR": "France",
    "GB": "United Kingdom",
    "IE": "Ireland",
    "IL": "Israel",
    "IN": "India",
    "IT": "Italy",
    "JP": "Japan",
    "KR": "South Korea",
    "MA": "Morocco",
    "MX": "Mexico",
    "NL": "Netherlands",
    "NZ": "New Zealand",
    "PE": "Peru",
    "PH": "Philippines",
    "PL": "Poland",
    "PT": "Portugal",
    "RU": "Russia",
    "SA": "Saudi Arabia",
    "TH": "Thailand",
    "TR": "Turkey",
    "TW": "Taiwan",
    "US": "United States",
}

# =====================================================
# Languages
# =====================================================

LANGUAGE_NAMES: Dict[str, str] = {
    "EN": "English",
    "ES": "Spanish",
    "FR": "French",
    "DE": "German",
    "JA": "Japanese",
    "KO": "Korean",
    "ZH": "Chinese (Mandarin)",
    "PT": "Portuguese (BR)",
    "IT": "Italian",
    "RU": "Russian",
    "AR": "Arabic",
    "HI": "Hindi",
    "NL": "Dutch",
    "PL": "Polish",
    "TR": "Turkish",
    "TL": "Filipino",
    "TH": "Thai",
}
