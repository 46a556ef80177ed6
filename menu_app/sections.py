"""Grouping of filtered entries into display sections."""

from __future__ import annotations

from typing import Iterable, Sequence

from menu_app.models import MenuEntry, Section


def group_into_sections(entries: Iterable[MenuEntry], order: Sequence[str]) -> list[Section]:
    """Group entries by category following `order`.

    Categories missing from `order` follow the known ones, in the order they
    first appear. Sections with no entries are left out.
    """
    buckets: dict[str, list[MenuEntry]] = {}
    for entry in entries:
        buckets.setdefault(entry.category, []).append(entry)

    known = [name for name in order if name in buckets]
    extra = [name for name in buckets if name not in order]
    return [Section(name=name, items=tuple(buckets[name])) for name in known + extra]
