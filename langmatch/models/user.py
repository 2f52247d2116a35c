"""
User profile model for the langmatch compatibility engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

try:
    from .language import LanguageSkill, ProficiencyLevel
    from .preferences import MatchingPreferences
except ImportError:
    from models.language import LanguageSkill, ProficiencyLevel
    from models.preferences import MatchingPreferences


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class UserProfile:
    user_id: str
    native_language: str
    learning_languages: Tuple[LanguageSkill, ...] = ()
    age: Optional[int] = None
    location: Optional[str] = None  # free text, e.g. "Lyon, France"
    country_code: Optional[str] = None  # ISO code of the user's current country
    coordinates: Optional[GeoPoint] = None
    is_online: bool = False
    display_name: Optional[str] = None
    preferences: MatchingPreferences = field(default_factory=MatchingPreferences)

    @property
    def learning_codes(self) -> FrozenSet[str]:
        return frozenset(s.language for s in self.learning_languages)

    def is_learning(self, language: str) -> bool:
        return any(s.language == language for s in self.learning_languages)

    def proficiency_in(self, language: str) -> Optional[ProficiencyLevel]:
        """Proficiency for a learning language (first entry wins), None if not learning it."""
        for s in self.learning_languages:
            if s.language == language:
                return s.proficiency
        return None

    @property
    def name(self) -> str:
        return self.display_name or self.user_id

    def to_dict(self) -> Dict:
        return {
            "user_id": self.user_id,
            "display_name": self.display_name,
            "native_language": self.native_language,
            "learning_languages": [s.to_dict() for s in self.learning_languages],
            "age": self.age,
            "location": self.location,
            "country_code": self.country_code,
            "coordinates": (
                {"latitude": self.coordinates.latitude, "longitude": self.coordinates.longitude}
                if self.coordinates
                else None
            ),
            "is_online": bool(self.is_online),
            "preferences": self.preferences.to_dict(),
        }

    @staticmethod
    def from_dict(d: Dict) -> "UserProfile":
        coords = d.get("coordinates")
        age = d.get("age")
        country = d.get("country_code")
        prefs = d.get("preferences") or {}
        if not isinstance(prefs, dict):
            raise TypeError(f"preferences must be an object, got {type(prefs).__name__}")
        return UserProfile(
            user_id=str(d["user_id"]),
            display_name=d.get("display_name"),
            native_language=str(d["native_language"]).upper(),
            learning_languages=tuple(LanguageSkill.from_dict(s) for s in d.get("learning_languages", [])),
            age=int(age) if age is not None else None,
            location=d.get("location"),
            country_code=str(country).upper() if country else None,
            coordinates=(
                GeoPoint(latitude=float(coords["latitude"]), longitude=float(coords["longitude"]))
                if coords
                else None
            ),
            is_online=bool(d.get("is_online", False)),
            preferences=MatchingPreferences.from_dict(prefs, home_country=country),
        )
