from __future__ import annotations

import asyncio
import inspect
from decimal import Decimal

import pytest

from menu_app.models import MenuEntry
from menu_app.persistence import MenuStore


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def menu_payload() -> dict:
    return {
        "menu": [
            {
                "name": "Greek Salad",
                "price": Decimal("12.99"),
                "description": "Crispy lettuce, peppers, olives and Chicago-style feta.",
                "image": "greekSalad.jpg",
                "category": "starters",
            },
            {
                "name": "Bruschetta",
                "price": Decimal("7.99"),
                "description": "Grilled bread smeared with garlic.",
                "image": "bruschetta.jpg",
                "category": "starters",
            },
            {
                "name": "Grilled Fish",
                "price": Decimal("20.00"),
                "description": "",
                "image": "grilledFish.jpg",
                "category": "mains",
            },
            {
                "name": "Lemon Dessert",
                "price": Decimal("6.50"),
                "description": "",
                "image": "lemonDessert.jpg",
                "category": "desserts",
            },
        ]
    }


@pytest.fixture
def entries() -> list[MenuEntry]:
    return [
        MenuEntry(1, "Greek Salad", "12.99", "", "greekSalad.jpg", "starters"),
        MenuEntry(2, "Bruschetta", "7.99", "", "bruschetta.jpg", "starters"),
        MenuEntry(3, "Grilled Fish", "20.00", "", "grilledFish.jpg", "mains"),
        MenuEntry(4, "Pasta", "18.99", "", "pasta.jpg", "mains"),
        MenuEntry(5, "Lemon Dessert", "6.50", "", "lemonDessert.jpg", "desserts"),
    ]


@pytest.fixture
def store(tmp_path) -> MenuStore:
    menu_store = MenuStore(tmp_path / "menu.db")
    menu_store.ensure_schema()
    return menu_store


class FakeTimer:
    def __init__(self, delay: float, callback) -> None:
        self.delay = delay
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Collects scheduled callbacks so tests decide when time passes."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.stopped]

    async def elapse(self) -> None:
        for timer in self.active:
            timer.stopped = True
            result = timer.callback()
            if inspect.isawaitable(result):
                await result


class FakeSource:
    def __init__(
        self,
        entries: list[MenuEntry] | None = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.entries = entries or []
        self.error = error
        self.gate = gate
        self.calls = 0

    async def fetch_menu(self) -> list[MenuEntry]:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.entries)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def make_source():
    return FakeSource
