"""Editable static section configuration."""

from __future__ import annotations

# Canonical section order for filters and grouped listings.
SECTIONS: tuple[str, ...] = ("starters", "mains", "desserts")

SECTION_LABELS: dict[str, str] = {
    "starters": "Starters",
    "mains": "Mains",
    "desserts": "Desserts",
}

SECTION_BADGE_STYLES: dict[str, str] = {
    "starters": "bold #0b1f0f on #5fbf72",
    "mains": "bold #ffffff on #b23a48",
    "desserts": "bold #333333 on #f4ce14",
}

DEFAULT_BADGE_STYLE = "bold #ffffff on #2f6db5"
