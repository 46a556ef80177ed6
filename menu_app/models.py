"""Domain models for the menu browser."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MenuEntry:
    """A cached menu item."""

    id: int
    name: str
    price: str
    description: str
    image: str
    category: str

    @property
    def amount(self) -> Decimal:
        return Decimal(self.price)


@dataclass(frozen=True)
class Section:
    """A category heading with the entries listed under it."""

    name: str
    items: tuple[MenuEntry, ...]


@dataclass
class FilterState:
    """Search text and category toggles for one screen session."""

    raw_text: str = ""
    committed_query: str = ""
    selections: list[bool] = field(default_factory=list)

    @classmethod
    def for_categories(cls, categories: list[str] | tuple[str, ...]) -> FilterState:
        return cls(selections=[False] * len(categories))

    def toggle(self, index: int) -> None:
        if not (0 <= index < len(self.selections)):
            raise IndexError(f"no category at index {index}")
        self.selections[index] = not self.selections[index]
