"""
Admin views for the langmatch CLI: browse profiles, rank feeds, explain scores.
"""

from __future__ import annotations

from typing import Dict, TYPE_CHECKING

try:
    from ..models.language import language_name
    from ..matching import (
        FACTORS,
        can_match,
        classify_match,
        compute_score_components,
        rank,
        score,
    )
except ImportError:
    from models.language import language_name
    from matching import (
        FACTORS,
        can_match,
        classify_match,
        compute_score_components,
        rank,
        score,
    )

try:
    from .helpers import input_int_in_range, input_user_id, vprint
except ImportError:
    from ui.helpers import input_int_in_range, input_user_id, vprint

if TYPE_CHECKING:
    from ..models.user import UserProfile


def format_profile(p: "UserProfile") -> str:
    learning = ", ".join(f"{language_name(s.language)} ({s.proficiency.display_name})" for s in p.learning_languages)
    age = p.age if p.age is not None else "?"
    online = "online" if p.is_online else "offline"
    return (
        f"{p.user_id:<10} {p.name:<14} age={age:<3} native={language_name(p.native_language):<10} "
        f"learning=[{learning}] location={p.location or '-'} ({online})"
    )


def show_all_users(profiles: Dict[str, "UserProfile"]) -> None:
    if not profiles:
        print("\n(No users loaded.)")
        return
    print(f"\n=== Users ({len(profiles)}) ===")
    for p in profiles.values():
        print("  " + format_profile(p))


def show_feed_for_user(profiles: Dict[str, "UserProfile"]) -> None:
    """Rank every other loaded profile for one requester and print the feed."""
    requester = input_user_id("Requester user ID: ", profiles)
    if requester is None:
        return
    limit = input_int_in_range("How many results to show (1-100): ", 1, 100)

    results = rank(requester, list(profiles.values()))
    if not results:
        print(f"\nNo eligible candidates for {requester.user_id}.")
        return

    vprint(f"\n{len(results)} of {len(profiles) - 1} candidates passed the hard filters.")
    print(f"\n=== Discovery feed for {requester.user_id} ===")
    for i, r in enumerate(results[:limit], start=1):
        online = "*" if r.candidate.is_online else " "
        print(f"{i:>3}. {online} {r.candidate.user_id:<10} score={r.score:>3} | {'; '.join(r.reasons)}")


def explain_pair(profiles: Dict[str, "UserProfile"]) -> None:
    """Print eligibility, match type and the per-factor score breakdown for one pair."""
    u = input_user_id("Requester user ID: ", profiles)
    if u is None:
        return
    v = input_user_id("Candidate user ID: ", profiles)
    if v is None:
        return

    match_type = classify_match(u, v)
    print(f"\n=== {u.user_id} -> {v.user_id} ===")
    print(f"Eligible (hard filters): {can_match(u, v)}")
    print(f"Match type: {match_type.value if match_type else 'none'}")

    components = compute_score_components(u, v)
    for factor in FACTORS:
        points, reasons = components[factor]
        note = f"  ({'; '.join(reasons)})" if reasons else ""
        print(f"  {factor:<12} {points:>3}{note}")
    total, _ = score(u, v)
    print(f"  {'total':<12} {total:>3}")
