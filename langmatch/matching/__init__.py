"""
Compatibility classification, hard filters, scoring and ranking.
"""

try:
    from .classifier import (
        has_primary_match,
        has_secondary_match,
        is_compatible,
        classify_match,
        matched_language_pair,
    )
    from .geo import (
        CountryNameLookup,
        default_country_name,
        haversine_km,
        distance_between,
    )
    from .filters import (
        passes_language_filter,
        passes_age_filter,
        passes_gender_filter,
        passes_location_filter,
        passes_intent_filter,
        can_match,
    )
    from .scoring import FACTORS, compute_score_components, score
    from .ranking import find_matches, rank
except ImportError:
    from matching.classifier import (
        has_primary_match,
        has_secondary_match,
        is_compatible,
        classify_match,
        matched_language_pair,
    )
    from matching.geo import (
        CountryNameLookup,
        default_country_name,
        haversine_km,
        distance_between,
    )
    from matching.filters import (
        passes_language_filter,
        passes_age_filter,
        passes_gender_filter,
        passes_location_filter,
        passes_intent_filter,
        can_match,
    )
    from matching.scoring import FACTORS, compute_score_components, score
    from matching.ranking import find_matches, rank

__all__ = [
    "has_primary_match",
    "has_secondary_match",
    "is_compatible",
    "classify_match",
    "matched_language_pair",
    "CountryNameLookup",
    "default_country_name",
    "haversine_km",
    "distance_between",
    "passes_language_filter",
    "passes_age_filter",
    "passes_gender_filter",
    "passes_location_filter",
    "passes_intent_filter",
    "can_match",
    "FACTORS",
    "compute_score_components",
    "score",
    "find_matches",
    "rank",
]
