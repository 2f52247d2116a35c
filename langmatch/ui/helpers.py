"""
Console helpers for the langmatch admin CLI.
"""

from __future__ import annotations

import builtins
from typing import Dict, Optional, TYPE_CHECKING

try:
    from ..config import VERBOSE
except ImportError:
    from config import VERBOSE

if TYPE_CHECKING:
    from ..models.user import UserProfile

_VERBOSE = VERBOSE


def set_verbose(flag: bool) -> None:
    """Enable/disable informational CLI output (useful in notebooks/experiments)."""
    global _VERBOSE
    _VERBOSE = bool(flag)


def vprint(*args, **kwargs) -> None:
    """Print only while verbose output is enabled."""
    if _VERBOSE:
        builtins.print(*args, **kwargs)


def input_int_in_range(prompt: str, min_val: int, max_val: int) -> int:
    """Ask until the user types an integer within [min_val, max_val]."""
    while True:
        try:
            val = int(input(prompt).strip())
            if min_val <= val <= max_val:
                return val
            print(f"Please enter an integer between {min_val} and {max_val}.")
        except ValueError:
            print("Invalid input. Please enter an integer.")


def input_user_id(prompt: str, profiles: Dict[str, "UserProfile"]) -> Optional["UserProfile"]:
    """Ask for a user id; returns None (after saying so) when it is unknown."""
    user_id = input(prompt).strip()
    profile = profiles.get(user_id)
    if profile is None:
        print(f"No user with ID {user_id!r}.")
    return profile
