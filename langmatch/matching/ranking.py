"""
Discovery-feed ranking for the langmatch compatibility engine.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, TYPE_CHECKING

try:
    from ..config import PARALLEL_THRESHOLD, MAX_WORKERS
    from ..models.result import MatchResult
except ImportError:
    from config import PARALLEL_THRESHOLD, MAX_WORKERS
    from models.result import MatchResult

try:
    from .classifier import is_compatible
    from .filters import can_match
    from .geo import CountryNameLookup, default_country_name
    from .scoring import score
except ImportError:
    from matching.classifier import is_compatible
    from matching.filters import can_match
    from matching.geo import CountryNameLookup, default_country_name
    from matching.scoring import score

if TYPE_CHECKING:
    from ..models.user import UserProfile

logger = logging.getLogger(__name__)


def find_matches(user: "UserProfile", candidates: Sequence["UserProfile"]) -> List["UserProfile"]:
    """Language-compatible candidates only, in input order; the user is never included."""
    return [c for c in candidates if c.user_id != user.user_id and is_compatible(user, c)]


def _evaluate(
    requester: "UserProfile",
    candidate: "UserProfile",
    country_name: CountryNameLookup,
) -> Optional[MatchResult]:
    if not can_match(requester, candidate, country_name):
        return None
    points, reasons = score(requester, candidate, country_name)
    return MatchResult(candidate=candidate, score=points, reasons=reasons)


def sort_results(results: List[MatchResult]) -> List[MatchResult]:
    """Score descending, online before offline on ties, input order otherwise."""
    return sorted(results, key=lambda r: (-r.score, not r.candidate.is_online))


def rank(
    requester: "UserProfile",
    candidates: Sequence["UserProfile"],
    country_name: CountryNameLookup = default_country_name,
    max_workers: Optional[int] = None,
) -> List[MatchResult]:
    """
    Build the discovery feed for `requester`.

    Steps:
      1) drop the requester itself
      2) hard filters
      3) score survivors
      4) sort (score desc, online first, stable)

    Pools of PARALLEL_THRESHOLD or more candidates are evaluated on a thread
    pool. Executor.map keeps input order, so both paths sort identically.
    """
    pool = [c for c in candidates if c.user_id != requester.user_id]

    if len(pool) >= PARALLEL_THRESHOLD:
        workers = max_workers or MAX_WORKERS
        logger.debug("Ranking %d candidates for %s on %d workers", len(pool), requester.user_id, workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            evaluated = list(executor.map(lambda c: _evaluate(requester, c, country_name), pool))
    else:
        evaluated = [_evaluate(requester, c, country_name) for c in pool]

    results = sort_results([r for r in evaluated if r is not None])
    logger.debug(
        "Ranked feed for %s: %d of %d candidates passed the hard filters",
        requester.user_id,
        len(results),
        len(pool),
    )
    return results
