"""Runtime configuration defaults for the menu cache and remote source."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("LITTLE_LEMON_DB_PATH", "data/little_lemon.db")
PROFILE_PATH = "data/profile.json"

MENU_URL = os.environ.get(
    "LITTLE_LEMON_MENU_URL",
    "https://coursera-react-native-api-9a99fdab2396.herokuapp.com/menuItems",
)
IMAGE_URL_TEMPLATE = (
    "https://github.com/Meta-Mobile-Developer-PC/Working-With-Data-API/blob/main/images/{image}?raw=true"
)

# Quiet period before a typed search is committed.
DEBOUNCE_SECONDS = 1.0

LOG_PATH = "/tmp/little-lemon-debug.log"
LOG_LEVEL = os.environ.get("LITTLE_LEMON_LOG_LEVEL", "INFO")
