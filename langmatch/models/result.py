"""
Match output models for the langmatch compatibility engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

try:
    from .user import UserProfile
except ImportError:
    from models.user import UserProfile


class MatchType(str, Enum):
    CLASSIC = "classic"  # native/learning languages complement each other
    SECONDARY = "secondary"  # both learning the same language


@dataclass(frozen=True)
class MatchedLanguagePair:
    """The language pairing that put a partner on a viewer's feed card."""

    partner_native_language: str
    partner_learning_languages: Tuple[str, ...]
    match_type: MatchType = MatchType.CLASSIC


@dataclass
class MatchResult:
    candidate: UserProfile
    score: int
    reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "user_id": self.candidate.user_id,
            "score": int(self.score),
            "reasons": list(self.reasons),
            "is_online": bool(self.candidate.is_online),
        }
