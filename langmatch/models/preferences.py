"""
Matching preference models for the langmatch compatibility engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

try:
    from .language import ProficiencyLevel
    from ..config import (
        DEFAULT_MIN_AGE,
        DEFAULT_MAX_AGE,
        LOCATION_PRESET_DISTANCES,
        LOCATION_PRESET_HOME_COUNTRY,
    )
except ImportError:
    from models.language import ProficiencyLevel
    from config import (
        DEFAULT_MIN_AGE,
        DEFAULT_MAX_AGE,
        LOCATION_PRESET_DISTANCES,
        LOCATION_PRESET_HOME_COUNTRY,
    )


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non_binary"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class GenderPreference(str, Enum):
    ALL = "all"
    SAME_ONLY = "same_only"
    DIFFERENT_ONLY = "different_only"

    def accepts(self, own: Gender, other: Gender) -> bool:
        if self is GenderPreference.SAME_ONLY:
            return own == other
        if self is GenderPreference.DIFFERENT_ONLY:
            return own != other
        return True


class LocationPreference(str, Enum):
    ANYWHERE = "anywhere"
    MAX_DISTANCE = "max_distance"
    SPECIFIC_COUNTRIES = "specific_countries"


class RelationshipIntent(str, Enum):
    OPEN_TO_DATING = "open_to_dating"
    FRIENDSHIP = "friendship"
    LANGUAGE_PRACTICE_ONLY = "language_practice_only"


@dataclass(frozen=True)
class TravelDestination:
    country: str  # ISO country code
    country_name: str
    city: Optional[str] = None
    active: bool = False

    @property
    def display_name(self) -> str:
        if self.city:
            return f"{self.city}, {self.country_name}"
        return self.country_name

    @staticmethod
    def is_active_on(end_date: Optional[date], day: date) -> bool:
        """A trip counts as active until its end date has passed; no end date means inactive."""
        if end_date is None:
            return False
        return end_date > day

    def to_dict(self) -> Dict:
        return {
            "country": self.country,
            "country_name": self.country_name,
            "city": self.city,
            "active": bool(self.active),
        }

    @staticmethod
    def from_dict(d: Dict, today: Optional[date] = None) -> "TravelDestination":
        # Back-compat: older records carry an end date instead of the flag
        if "active" in d:
            active = bool(d["active"])
        else:
            end = d.get("end_date")
            end_date = date.fromisoformat(end) if end else None
            active = TravelDestination.is_active_on(end_date, today or date.today())
        return TravelDestination(
            country=str(d.get("country", "")).upper(),
            country_name=str(d.get("country_name", "")),
            city=d.get("city"),
            active=active,
        )


@dataclass(frozen=True)
class MatchingPreferences:
    gender: Gender = Gender.PREFER_NOT_TO_SAY
    gender_preference: GenderPreference = GenderPreference.ALL
    min_age: int = DEFAULT_MIN_AGE
    max_age: int = DEFAULT_MAX_AGE

    location_preference: LocationPreference = LocationPreference.ANYWHERE
    max_distance_km: Optional[float] = None
    preferred_countries: FrozenSet[str] = frozenset()

    travel_destination: Optional[TravelDestination] = None

    relationship_intents: FrozenSet[RelationshipIntent] = frozenset({RelationshipIntent.LANGUAGE_PRACTICE_ONLY})
    # language code -> country codes preferred for native speakers of that language.
    # Stored read-only and left out of the hash; the other fields identify the record.
    regional_language_preferences: Mapping[str, FrozenSet[str]] = field(default_factory=dict, hash=False)

    allow_non_native_matches: bool = False
    min_proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER
    max_proficiency_level: ProficiencyLevel = ProficiencyLevel.ADVANCED

    def __post_init__(self):
        regional = {lang: frozenset(codes) for lang, codes in self.regional_language_preferences.items()}
        object.__setattr__(self, "regional_language_preferences", MappingProxyType(regional))

    def accepts_age(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age

    def accepts_proficiency(self, level: ProficiencyLevel) -> bool:
        return level.within(self.min_proficiency_level, self.max_proficiency_level)

    @property
    def active_travel_destination(self) -> Optional[TravelDestination]:
        if self.travel_destination is not None and self.travel_destination.active:
            return self.travel_destination
        return None

    @property
    def open_to_socializing(self) -> bool:
        """True if the user wants anything beyond in-app language practice."""
        return bool(
            self.relationship_intents
            & {RelationshipIntent.FRIENDSHIP, RelationshipIntent.OPEN_TO_DATING}
        )

    def to_dict(self) -> Dict:
        return {
            "gender": self.gender.value,
            "gender_preference": self.gender_preference.value,
            "min_age": int(self.min_age),
            "max_age": int(self.max_age),
            "location_preference": self.location_preference.value,
            "max_distance_km": self.max_distance_km,
            "preferred_countries": sorted(self.preferred_countries),
            "travel_destination": self.travel_destination.to_dict() if self.travel_destination else None,
            "relationship_intents": sorted(i.value for i in self.relationship_intents),
            "regional_language_preferences": {
                lang: sorted(codes) for lang, codes in self.regional_language_preferences.items()
            },
            "allow_non_native_matches": bool(self.allow_non_native_matches),
            "min_proficiency_level": self.min_proficiency_level.value,
            "max_proficiency_level": self.max_proficiency_level.value,
        }

    @staticmethod
    def from_dict(d: Dict, home_country: Optional[str] = None) -> "MatchingPreferences":
        """
        home_country is the owner's ISO code, used to resolve the legacy
        "country" preset; without it that preset falls back to anywhere.
        """
        location_pref = d.get("location_preference", LocationPreference.ANYWHERE.value)
        max_distance = d.get("max_distance_km")
        preferred = frozenset(str(c).upper() for c in d.get("preferred_countries") or [])
        # Back-compat: distance presets from older clients
        if location_pref in LOCATION_PRESET_DISTANCES:
            if max_distance is None:
                max_distance = LOCATION_PRESET_DISTANCES[location_pref]
            location_pref = LocationPreference.MAX_DISTANCE.value
        elif location_pref == LOCATION_PRESET_HOME_COUNTRY:
            if home_country:
                preferred = preferred | {str(home_country).upper()}
                location_pref = LocationPreference.SPECIFIC_COUNTRIES.value
            else:
                location_pref = LocationPreference.ANYWHERE.value

        travel = d.get("travel_destination")
        intents = d.get("relationship_intents")
        if intents is None:
            intents = [RelationshipIntent.LANGUAGE_PRACTICE_ONLY.value]

        return MatchingPreferences(
            gender=Gender(d.get("gender", Gender.PREFER_NOT_TO_SAY.value)),
            gender_preference=GenderPreference(d.get("gender_preference", GenderPreference.ALL.value)),
            min_age=int(d.get("min_age", DEFAULT_MIN_AGE)),
            max_age=int(d.get("max_age", DEFAULT_MAX_AGE)),
            location_preference=LocationPreference(location_pref),
            max_distance_km=float(max_distance) if max_distance is not None else None,
            preferred_countries=preferred,
            travel_destination=TravelDestination.from_dict(travel) if travel else None,
            relationship_intents=frozenset(RelationshipIntent(i) for i in intents),
            regional_language_preferences={
                str(lang).upper(): frozenset(str(c).upper() for c in codes)
                for lang, codes in (d.get("regional_language_preferences") or {}).items()
            },
            allow_non_native_matches=bool(d.get("allow_non_native_matches", False)),
            min_proficiency_level=ProficiencyLevel(d.get("min_proficiency_level", ProficiencyLevel.BEGINNER.value)),
            max_proficiency_level=ProficiencyLevel(d.get("max_proficiency_level", ProficiencyLevel.ADVANCED.value)),
        )
