"""
Weighted compatibility scoring for the langmatch compatibility engine.

Eight independent factors each return (points, reasons). The final score is
their sum clamped to SCORE_CAP, and the reasons keep factor order.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

try:
    from ..config import (
        SCORE_CAP,
        LANGUAGE_PRIMARY_POINTS,
        LANGUAGE_SECONDARY_POINTS,
        PROFICIENCY_MAX_POINTS,
        PROFICIENCY_STEP_PENALTY,
        PROFICIENCY_SIMILAR_MAX_DIFF,
        AGE_BANDS,
        DISTANCE_BANDS,
        DISTANCE_FAR_POINTS,
        INTENT_POINTS,
        INTENT_PRIORITY,
        GENDER_POINTS,
        TRAVEL_POINTS,
        TRAVEL_CAP,
        REGIONAL_POINTS,
        REGIONAL_CAP,
        NEUTRAL_AGE_POINTS,
        NEUTRAL_DISTANCE_POINTS,
        REASON_PERFECT_EXCHANGE,
        REASON_SAME_LANGUAGE,
        REASON_SIMILAR_PROFICIENCY,
        REASON_INTENT,
        REASON_TRAVELING_TO_THEM,
        REASON_TRAVELING_TO_YOU,
        REASON_REGIONAL,
    )
    from ..models.preferences import GenderPreference, LocationPreference
except ImportError:
    from config import (
        SCORE_CAP,
        LANGUAGE_PRIMARY_POINTS,
        LANGUAGE_SECONDARY_POINTS,
        PROFICIENCY_MAX_POINTS,
        PROFICIENCY_STEP_PENALTY,
        PROFICIENCY_SIMILAR_MAX_DIFF,
        AGE_BANDS,
        DISTANCE_BANDS,
        DISTANCE_FAR_POINTS,
        INTENT_POINTS,
        INTENT_PRIORITY,
        GENDER_POINTS,
        TRAVEL_POINTS,
        TRAVEL_CAP,
        REGIONAL_POINTS,
        REGIONAL_CAP,
        NEUTRAL_AGE_POINTS,
        NEUTRAL_DISTANCE_POINTS,
        REASON_PERFECT_EXCHANGE,
        REASON_SAME_LANGUAGE,
        REASON_SIMILAR_PROFICIENCY,
        REASON_INTENT,
        REASON_TRAVELING_TO_THEM,
        REASON_TRAVELING_TO_YOU,
        REASON_REGIONAL,
    )
    from models.preferences import GenderPreference, LocationPreference

try:
    from .classifier import has_primary_match, has_secondary_match
    from .filters import mutual_age_acceptance, mutual_gender_acceptance
    from .geo import (
        CountryNameLookup,
        default_country_name,
        destination_matches,
        distance_between,
        located_in_countries,
    )
except ImportError:
    from matching.classifier import has_primary_match, has_secondary_match
    from matching.filters import mutual_age_acceptance, mutual_gender_acceptance
    from matching.geo import (
        CountryNameLookup,
        default_country_name,
        destination_matches,
        distance_between,
        located_in_countries,
    )

if TYPE_CHECKING:
    from ..models.user import UserProfile

Component = Tuple[int, List[str]]

# Evaluation order of the factors; reasons are concatenated in this order
FACTORS: Tuple[str, ...] = (
    "language",
    "proficiency",
    "age",
    "distance",
    "intent",
    "gender",
    "travel",
    "regional",
)


def language_points(u: "UserProfile", v: "UserProfile") -> Component:
    if has_primary_match(u, v):
        return LANGUAGE_PRIMARY_POINTS, [REASON_PERFECT_EXCHANGE]
    if has_secondary_match(u, v):
        return LANGUAGE_SECONDARY_POINTS, [REASON_SAME_LANGUAGE]
    return 0, []


def proficiency_gap(u: "UserProfile", v: "UserProfile") -> Optional[int]:
    """Smallest rank difference over the languages both users are learning."""
    gaps = []
    for language in u.learning_codes & v.learning_codes:
        pu = u.proficiency_in(language)
        pv = v.proficiency_in(language)
        if pu is not None and pv is not None:
            gaps.append(abs(pu.rank - pv.rank))
    return min(gaps) if gaps else None


def proficiency_points(u: "UserProfile", v: "UserProfile") -> Component:
    gap = proficiency_gap(u, v)
    if gap is None:
        return 0, []
    points = max(0, PROFICIENCY_MAX_POINTS - PROFICIENCY_STEP_PENALTY * gap)
    reasons = [REASON_SIMILAR_PROFICIENCY] if gap <= PROFICIENCY_SIMILAR_MAX_DIFF else []
    return points, reasons


def age_points(u: "UserProfile", v: "UserProfile") -> Component:
    if u.age is None or v.age is None:
        return NEUTRAL_AGE_POINTS, []
    if not mutual_age_acceptance(u, v):
        return 0, []
    diff = abs(u.age - v.age)
    for max_diff, points, reason in AGE_BANDS:
        if diff <= max_diff:
            return points, [reason] if reason else []
    return 0, []


def distance_points(u: "UserProfile", v: "UserProfile") -> Component:
    if (
        u.preferences.location_preference is LocationPreference.ANYWHERE
        and v.preferences.location_preference is LocationPreference.ANYWHERE
    ):
        return NEUTRAL_DISTANCE_POINTS, []
    distance_km = distance_between(u, v)
    if distance_km is None:
        return NEUTRAL_DISTANCE_POINTS, []
    for max_km, points, reason in DISTANCE_BANDS:
        if distance_km <= max_km:
            return points, [reason] if reason else []
    return DISTANCE_FAR_POINTS, []


def intent_points(u: "UserProfile", v: "UserProfile") -> Component:
    shared = {i.value for i in u.preferences.relationship_intents & v.preferences.relationship_intents}
    for intent in INTENT_PRIORITY:
        if intent in shared:
            return INTENT_POINTS[intent], [REASON_INTENT[intent]]
    return 0, []


def gender_points(u: "UserProfile", v: "UserProfile") -> Component:
    if (
        u.preferences.gender_preference is GenderPreference.ALL
        and v.preferences.gender_preference is GenderPreference.ALL
    ):
        return GENDER_POINTS, []
    return (GENDER_POINTS if mutual_gender_acceptance(u, v) else 0), []


def travel_points(
    u: "UserProfile",
    v: "UserProfile",
    country_name: CountryNameLookup = default_country_name,
) -> Component:
    points = 0
    reasons: List[str] = []

    trip = u.preferences.active_travel_destination
    if trip is not None and destination_matches(trip, v, country_name):
        points += TRAVEL_POINTS
        reasons.append(REASON_TRAVELING_TO_THEM)

    trip = v.preferences.active_travel_destination
    if trip is not None and destination_matches(trip, u, country_name):
        points += TRAVEL_POINTS
        reasons.append(REASON_TRAVELING_TO_YOU)

    return min(points, TRAVEL_CAP), reasons


def _regional_hits(
    chooser: "UserProfile",
    speaker: "UserProfile",
    country_name: CountryNameLookup,
) -> int:
    hits = 0
    for language, countries in chooser.preferences.regional_language_preferences.items():
        if speaker.native_language != language:
            continue
        if located_in_countries(speaker, countries, country_name) is True:
            hits += 1
    return hits


def regional_points(
    u: "UserProfile",
    v: "UserProfile",
    country_name: CountryNameLookup = default_country_name,
) -> Component:
    own_hits = _regional_hits(u, v, country_name)
    # the reciprocal direction counts without adding a reason
    reverse_hits = _regional_hits(v, u, country_name)
    points = REGIONAL_POINTS * (own_hits + reverse_hits)
    return min(points, REGIONAL_CAP), [REASON_REGIONAL] * own_hits


def compute_score_components(
    u: "UserProfile",
    v: "UserProfile",
    country_name: CountryNameLookup = default_country_name,
) -> Dict[str, Component]:
    """
    Per-factor breakdown for requester `u` looking at candidate `v`.
    Keys follow FACTORS order.
    """
    return {
        "language": language_points(u, v),
        "proficiency": proficiency_points(u, v),
        "age": age_points(u, v),
        "distance": distance_points(u, v),
        "intent": intent_points(u, v),
        "gender": gender_points(u, v),
        "travel": travel_points(u, v, country_name),
        "regional": regional_points(u, v, country_name),
    }


def score(
    u: "UserProfile",
    v: "UserProfile",
    country_name: CountryNameLookup = default_country_name,
) -> Tuple[int, List[str]]:
    """Compatibility score in [0, SCORE_CAP] plus the reasons behind it."""
    total = 0
    reasons: List[str] = []
    for points, factor_reasons in compute_score_components(u, v, country_name).values():
        total += points
        reasons.extend(factor_reasons)
    return max(0, min(total, SCORE_CAP)), reasons
