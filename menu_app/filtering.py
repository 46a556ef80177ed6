"""Text and category filtering over menu entries."""

from __future__ import annotations

from typing import Iterable, Sequence

from menu_app.models import MenuEntry


def name_matches(name: str, text: str) -> bool:
    """Case-insensitive substring match; empty text matches every name."""
    if not text:
        return True
    return text.casefold() in name.casefold()


def filter_entries(
    entries: Iterable[MenuEntry],
    text: str,
    active_categories: Iterable[str],
) -> list[MenuEntry]:
    """Return entries whose name contains `text` and whose category is active."""
    allowed = set(active_categories)
    return [entry for entry in entries if entry.category in allowed and name_matches(entry.name, text)]


def active_categories(categories: Sequence[str], selections: Sequence[bool]) -> list[str]:
    """Resolve toggle selections into the categories to query.

    No selected toggle means no category filter, so every category is active.
    """
    if len(categories) != len(selections):
        raise ValueError("selections must have one flag per category")
    if not any(selections):
        return list(categories)
    return [category for category, selected in zip(categories, selections) if selected]
