"""
JSON profile storage used by the admin CLI.

The engine never touches files; this module only feeds it fixture profiles.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Dict, Iterable, Optional

try:
    from ..config import PROFILES_FILE
    from ..models.user import UserProfile
except ImportError:
    from config import PROFILES_FILE
    from models.user import UserProfile

logger = logging.getLogger(__name__)


class ProfileFormatError(ValueError):
    """A profiles file (or one record in it) could not be decoded."""

    def __init__(self, message: str, user_id: Optional[str] = None):
        super().__init__(message)
        self.user_id = user_id


def profiles_from_dict(data: Dict) -> Dict[str, UserProfile]:
    """Decode {"users": [...]} into profiles keyed by user_id, keeping file order."""
    records = data.get("users")
    if not isinstance(records, list):
        raise ProfileFormatError("expected a top-level 'users' list")

    profiles: Dict[str, UserProfile] = {}
    for i, record in enumerate(records):
        user_id = record.get("user_id") if isinstance(record, dict) else None
        try:
            profile = UserProfile.from_dict(record)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ProfileFormatError(f"invalid user record #{i} ({user_id}): {e}", user_id=user_id) from e
        if profile.user_id in profiles:
            raise ProfileFormatError(f"duplicate user_id {profile.user_id!r}", user_id=profile.user_id)
        profiles[profile.user_id] = profile
    return profiles


def load_profiles(path: str = PROFILES_FILE) -> Dict[str, UserProfile]:
    """Load profiles from a JSON file. A missing file means no users yet."""
    if not os.path.exists(path):
        logger.info("No profiles file at %s, starting empty", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProfileFormatError(f"{path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ProfileFormatError(f"could not read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileFormatError(f"{path}: expected a JSON object")
    profiles = profiles_from_dict(data)
    logger.info("Loaded %d profiles from %s", len(profiles), path)
    return profiles


def save_profiles(profiles: Iterable[UserProfile], path: str = PROFILES_FILE) -> None:
    """Write profiles atomically (tmp file + rename)."""
    data = {"users": [p.to_dict() for p in profiles]}
    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
