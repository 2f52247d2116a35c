"""
Language compatibility classification for the langmatch compatibility engine.

Both the hard filters and the scorer go through this module, so eligibility
and the language sub-score can never disagree.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

try:
    from ..models.result import MatchType, MatchedLanguagePair
except ImportError:
    from models.result import MatchType, MatchedLanguagePair

if TYPE_CHECKING:
    from ..models.user import UserProfile


def has_primary_match(u: "UserProfile", v: "UserProfile") -> bool:
    """Each user's native language is one the other is learning."""
    return v.is_learning(u.native_language) and u.is_learning(v.native_language)


def _accepts_partner_level(acceptor: "UserProfile", partner: "UserProfile", language: str) -> bool:
    if not acceptor.preferences.allow_non_native_matches:
        return False
    level = partner.proficiency_in(language)
    return level is not None and acceptor.preferences.accepts_proficiency(level)


def has_secondary_match(u: "UserProfile", v: "UserProfile") -> bool:
    """
    Both users learn a common language and at least one of them accepts
    non-native partners whose level in it falls within their proficiency range.
    """
    if not (u.preferences.allow_non_native_matches or v.preferences.allow_non_native_matches):
        return False

    common = u.learning_codes & v.learning_codes
    for language in sorted(common):
        if _accepts_partner_level(u, v, language) or _accepts_partner_level(v, u, language):
            return True
    return False


def is_compatible(u: "UserProfile", v: "UserProfile") -> bool:
    return has_primary_match(u, v) or has_secondary_match(u, v)


def classify_match(u: "UserProfile", v: "UserProfile") -> Optional[MatchType]:
    """CLASSIC for a primary match, SECONDARY for a secondary one, None if incompatible."""
    if has_primary_match(u, v):
        return MatchType.CLASSIC
    if has_secondary_match(u, v):
        return MatchType.SECONDARY
    return None


def matched_language_pair(viewer: "UserProfile", partner: "UserProfile") -> Optional[MatchedLanguagePair]:
    """Language context for showing `partner` on `viewer`'s feed card."""
    match_type = classify_match(viewer, partner)
    if match_type is None:
        return None
    return MatchedLanguagePair(
        partner_native_language=partner.native_language,
        partner_learning_languages=tuple(s.language for s in partner.learning_languages),
        match_type=match_type,
    )
