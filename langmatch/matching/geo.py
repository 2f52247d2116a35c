"""
Geographic helpers for the location, travel and regional checks.

Country display names come from an injected lookup so the engine never
reaches out to a geo service itself.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

import numpy as np

try:
    from ..config import COUNTRY_NAMES, EARTH_RADIUS_KM
    from ..models.preferences import TravelDestination
    from ..models.user import GeoPoint, UserProfile
except ImportError:
    from config import COUNTRY_NAMES, EARTH_RADIUS_KM
    from models.preferences import TravelDestination
    from models.user import GeoPoint, UserProfile

# code -> display name, None when the code is unknown
CountryNameLookup = Callable[[str], Optional[str]]


def default_country_name(code: str) -> Optional[str]:
    """Resolve a country code against the built-in COUNTRY_NAMES table."""
    return COUNTRY_NAMES.get(code.upper())


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers."""
    lat1, lon1, lat2, lon2 = np.radians([a.latitude, a.longitude, b.latitude, b.longitude])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = np.sin(dlat / 2.0) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2
    return float(2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(min(1.0, float(h)))))


def distance_between(u: UserProfile, v: UserProfile) -> Optional[float]:
    """Distance between two users, None unless both shared coordinates."""
    if u.coordinates is None or v.coordinates is None:
        return None
    return haversine_km(u.coordinates, v.coordinates)


def mentions(location: Optional[str], text: Optional[str]) -> bool:
    """Case-insensitive substring test of `text` inside a free-text location."""
    if not location or not text:
        return False
    return text.strip().lower() in location.lower()


def located_in_countries(
    user: UserProfile,
    country_codes: Iterable[str],
    country_name: CountryNameLookup = default_country_name,
) -> Optional[bool]:
    """
    Whether a user is located in one of the given countries.

    A user with a country code is compared exactly. Otherwise the localized
    country names are searched for in the free-text location. Returns None
    when the user has no location data at all.
    """
    codes = {c.upper() for c in country_codes}
    if user.country_code:
        return user.country_code.upper() in codes
    if not user.location:
        return None
    for code in codes:
        if mentions(user.location, country_name(code)):
            return True
    return False


def destination_matches(
    destination: TravelDestination,
    user: UserProfile,
    country_name: CountryNameLookup = default_country_name,
) -> bool:
    """Whether a travel destination points at where `user` lives."""
    if user.country_code and destination.country:
        return user.country_code.upper() == destination.country.upper()
    if mentions(user.location, destination.city):
        return True
    name = destination.country_name or (country_name(destination.country) if destination.country else None)
    return mentions(user.location, name)
