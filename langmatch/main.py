"""
Main entry point for the langmatch admin CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict

try:
    from .config import LOG_LEVEL, PROFILES_FILE
    from .models.user import UserProfile
    from .persistence import ProfileFormatError, load_profiles
    from .ui import (
        input_int_in_range,
        show_all_users,
        show_feed_for_user,
        explain_pair,
        show_compatibility_graph,
    )
except ImportError:
    from config import LOG_LEVEL, PROFILES_FILE
    from models.user import UserProfile
    from persistence import ProfileFormatError, load_profiles
    from ui import (
        input_int_in_range,
        show_all_users,
        show_feed_for_user,
        explain_pair,
        show_compatibility_graph,
    )


def reload_profiles(path: str) -> Dict[str, UserProfile]:
    """Load profiles, reporting (not raising) a malformed file."""
    try:
        profiles = load_profiles(path)
    except ProfileFormatError as e:
        print(f"Failed to load profiles from {path}: {e}")
        return {}
    print(f"Loaded {len(profiles)} profiles from {path}.")
    return profiles


def main() -> None:
    """Main menu."""
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    path = sys.argv[1] if len(sys.argv) > 1 else PROFILES_FILE
    profiles = reload_profiles(path)

    while True:
        print("\n=== Language Exchange Compatibility Engine ===")
        print("1) Show all users")
        print("2) Rank discovery feed for a user")
        print("3) Explain the score of a pair")
        print("4) Show compatibility graph")
        print("5) Reload profiles file")
        print("6) Exit")
        choice = input_int_in_range("Choose (1-6): ", 1, 6)

        if choice == 1:
            show_all_users(profiles)
        elif choice == 2:
            show_feed_for_user(profiles)
        elif choice == 3:
            explain_pair(profiles)
        elif choice == 4:
            show_compatibility_graph(profiles)
        elif choice == 5:
            profiles = reload_profiles(path)
        else:
            print("Goodbye!")
            break


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting...")
        sys.exit(0)
