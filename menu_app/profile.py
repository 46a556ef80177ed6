"""Read-only access to the saved user profile."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from menu_app.config import PROFILE_PATH
from menu_app.schemas import UserProfile

logger = logging.getLogger(__name__)


def load_profile(path: str | Path = PROFILE_PATH) -> UserProfile | None:
    """Return the saved profile, or None when there is no usable one."""
    profile_file = Path(path)
    if not profile_file.exists():
        return None
    try:
        return UserProfile.model_validate_json(profile_file.read_bytes())
    except (OSError, ValidationError) as exc:
        logger.warning("profile_ignored path=%s error=%s", profile_file, exc)
        return None
