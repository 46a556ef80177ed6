"""Cache-first menu loading and the debounced filter pipeline."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Protocol, Sequence

from menu_app.config import DEBOUNCE_SECONDS
from menu_app.constant import SECTIONS
from menu_app.debounce import Debouncer, Scheduler
from menu_app.errors import MenuError
from menu_app.filtering import active_categories
from menu_app.models import FilterState, MenuEntry, Section
from menu_app.persistence import MenuStore
from menu_app.sections import group_into_sections

logger = logging.getLogger(__name__)


class MenuFetcher(Protocol):
    async def fetch_menu(self) -> list[MenuEntry]: ...


class MenuController:
    """Owns the cache-vs-fetch decision and the current grouped view.

    Store work runs in a worker thread under one lock, so an import and a
    query never overlap and queries complete in the order they were issued.
    """

    def __init__(
        self,
        store: MenuStore,
        source: MenuFetcher,
        schedule: Scheduler,
        *,
        sections: Sequence[str] = SECTIONS,
        debounce_delay: float = DEBOUNCE_SECONDS,
        on_change: Callable[[], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.source = source
        self.categories: list[str] = list(sections)
        self.state = FilterState.for_categories(self.categories)
        self.sections: list[Section] = []
        self.ready = False
        self.error: str | None = None
        self.on_change = on_change
        self.on_error = on_error
        self._debouncer = Debouncer(schedule, debounce_delay)
        self._lock = asyncio.Lock()
        self._import: asyncio.Future[None] | None = None

    async def activate(self) -> None:
        """Populate the cache from the remote source if empty, then list it."""
        async with self._lock:
            self.error = None
            listed_with = None
            try:
                await self._populate()
                self._add_categories(await asyncio.to_thread(self.store.categories))
                listed_with = (self.state.committed_query, list(self.state.selections))
                entries = await self._query()
            except MenuError as exc:
                self._report(exc)
                entries = []
            self.sections = group_into_sections(entries, self.categories)
            self.ready = True
        logger.info("menu_ready sections=%d error=%s", len(self.sections), self.error is not None)
        self._changed()
        if listed_with is not None and listed_with != (self.state.committed_query, self.state.selections):
            # Filters changed while the listing query was running.
            await self.refresh()

    async def _populate(self) -> None:
        # The import outlives a cancelled activate(); the next one waits for it
        # instead of fetching again.
        if self._import is None or self._import.done():
            self._import = asyncio.ensure_future(self._import_if_empty())
            self._import.add_done_callback(_consume_result)
        await asyncio.shield(self._import)

    async def _import_if_empty(self) -> None:
        await asyncio.to_thread(self.store.ensure_schema)
        if await asyncio.to_thread(self.store.is_empty):
            entries = await self.source.fetch_menu()
            await asyncio.to_thread(self.store.bulk_insert, entries)

    async def _wait_for_import(self) -> None:
        if self._import is not None and not self._import.done():
            await asyncio.wait({self._import})

    async def _query(self) -> list[MenuEntry]:
        return await asyncio.to_thread(
            self.store.query, self.state.committed_query, self.active_categories()
        )

    def _add_categories(self, names: Iterable[str]) -> None:
        added = False
        for name in names:
            if name not in self.categories:
                self.categories.append(name)
                self.state.selections.append(False)
                added = True
        if added:
            logger.info("categories_extended categories=%s", ",".join(self.categories))

    def on_text_changed(self, text: str) -> None:
        """Record a keystroke and restart the quiet-period timer."""
        self.state.raw_text = text
        self._debouncer.call(self.commit_query, text)
        self._changed()

    async def commit_query(self, text: str) -> None:
        if text == self.state.committed_query:
            return
        self.state.committed_query = text
        logger.debug("query_committed text=%r", text)
        await self.refresh()

    async def toggle_category(self, index: int) -> None:
        self.state.toggle(index)
        await self.refresh()

    def active_categories(self) -> list[str]:
        return active_categories(self.categories, self.state.selections)

    async def refresh(self) -> None:
        """Re-query the cache with the committed text and active categories."""
        if not self.ready:
            # activate() lists with the latest state once the cache is loaded.
            self._changed()
            return
        async with self._lock:
            await self._wait_for_import()
            try:
                entries = await self._query()
            except MenuError as exc:
                self._report(exc)
                entries = []
            else:
                self.error = None
            self.sections = group_into_sections(entries, self.categories)
        self._changed()

    def close(self) -> None:
        self._debouncer.cancel()

    def _report(self, exc: MenuError) -> None:
        message = str(exc)
        if message == self.error:
            # Already shown; a broken store fails every re-query the same way.
            return
        self.error = message
        logger.error("menu_error kind=%s message=%s", type(exc).__name__, exc)
        if self.on_error is not None:
            self.on_error(self.error)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()


def _consume_result(future: asyncio.Future[None]) -> None:
    # Failures reach whichever activate() awaits the import; this only keeps
    # asyncio from warning when that caller was cancelled.
    if not future.cancelled():
        future.exception()
