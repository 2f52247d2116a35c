"""
Language and proficiency models for the langmatch compatibility engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

try:
    from ..config import LANGUAGE_NAMES
except ImportError:
    from config import LANGUAGE_NAMES


class ProficiencyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    NATIVE = "native"

    @property
    def rank(self) -> int:
        """Ordinal used for every proficiency comparison (1 = beginner, 4 = native)."""
        return _PROFICIENCY_RANKS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def within(self, low: "ProficiencyLevel", high: "ProficiencyLevel") -> bool:
        """Inclusive range check on ranks."""
        return low.rank <= self.rank <= high.rank


_PROFICIENCY_RANKS: Dict[ProficiencyLevel, int] = {
    ProficiencyLevel.BEGINNER: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
    ProficiencyLevel.NATIVE: 4,
}


@dataclass(frozen=True)
class LanguageSkill:
    language: str  # language code, e.g. "FR"
    proficiency: ProficiencyLevel = ProficiencyLevel.BEGINNER

    def to_dict(self) -> Dict:
        return {"language": self.language, "proficiency": self.proficiency.value}

    @staticmethod
    def from_dict(d: Dict) -> "LanguageSkill":
        return LanguageSkill(
            language=str(d["language"]).upper(),
            proficiency=ProficiencyLevel(d.get("proficiency", ProficiencyLevel.BEGINNER.value)),
        )


def language_name(code: str) -> str:
    """Display name for a language code; unknown codes are shown as-is."""
    return LANGUAGE_NAMES.get(code.upper(), code)
