"""
Hard eligibility filters for the langmatch compatibility engine.

Every filter is symmetric in its two arguments and treats missing optional
data as a pass.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

try:
    from ..models.preferences import LocationPreference
except ImportError:
    from models.preferences import LocationPreference

try:
    from .classifier import is_compatible
    from .geo import CountryNameLookup, default_country_name, distance_between, located_in_countries
except ImportError:
    from matching.classifier import is_compatible
    from matching.geo import CountryNameLookup, default_country_name, distance_between, located_in_countries

if TYPE_CHECKING:
    from ..models.user import UserProfile


def passes_language_filter(u: "UserProfile", v: "UserProfile") -> bool:
    return is_compatible(u, v)


def mutual_age_acceptance(u: "UserProfile", v: "UserProfile") -> bool:
    """Each user's age lies within the other's [min_age, max_age]. Both ages must be known."""
    if u.age is None or v.age is None:
        return False
    return u.preferences.accepts_age(v.age) and v.preferences.accepts_age(u.age)


def passes_age_filter(u: "UserProfile", v: "UserProfile") -> bool:
    if u.age is None or v.age is None:
        return True
    return mutual_age_acceptance(u, v)


def mutual_gender_acceptance(u: "UserProfile", v: "UserProfile") -> bool:
    pu, pv = u.preferences, v.preferences
    return (
        pu.gender_preference.accepts(pu.gender, pv.gender)
        and pv.gender_preference.accepts(pv.gender, pu.gender)
    )


def passes_gender_filter(u: "UserProfile", v: "UserProfile") -> bool:
    return mutual_gender_acceptance(u, v)


def _side_accepts_location(
    side: "UserProfile",
    other: "UserProfile",
    distance_km: Optional[float],
    country_name: CountryNameLookup,
) -> bool:
    prefs = side.preferences
    if distance_km is not None and prefs.max_distance_km is not None:
        if distance_km > prefs.max_distance_km:
            return False

    if prefs.location_preference is LocationPreference.SPECIFIC_COUNTRIES and prefs.preferred_countries:
        # None (no location data on the other side) is not a failure
        if located_in_countries(other, prefs.preferred_countries, country_name) is False:
            return False
    return True


def passes_location_filter(
    u: "UserProfile",
    v: "UserProfile",
    country_name: CountryNameLookup = default_country_name,
) -> bool:
    if (
        u.preferences.location_preference is LocationPreference.ANYWHERE
        or v.preferences.location_preference is LocationPreference.ANYWHERE
    ):
        return True

    distance_km = distance_between(u, v)
    return (
        _side_accepts_location(u, v, distance_km, country_name)
        and _side_accepts_location(v, u, distance_km, country_name)
    )


def passes_intent_filter(u: "UserProfile", v: "UserProfile") -> bool:
    return bool(u.preferences.relationship_intents & v.preferences.relationship_intents)


def can_match(
    u: "UserProfile",
    v: "UserProfile",
    country_name: CountryNameLookup = default_country_name,
) -> bool:
    """Run the hard-filter stage for a pair; False as soon as one gate fails."""
    if u.user_id == v.user_id:
        return False
    return (
        passes_language_filter(u, v)
        and passes_age_filter(u, v)
        and passes_gender_filter(u, v)
        and passes_location_filter(u, v, country_name)
        and passes_intent_filter(u, v)
    )
