"""HTTP source for the canonical restaurant menu."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

import httpx
from pydantic import ValidationError

from menu_app.config import MENU_URL
from menu_app.errors import FetchFailure, MalformedEntry
from menu_app.models import MenuEntry
from menu_app.schemas import RemoteMenuItem

logger = logging.getLogger(__name__)


def to_entry(record: Any, entry_id: int, position: int) -> MenuEntry:
    """Validate one remote record and map it to a cache entry."""
    try:
        item = RemoteMenuItem.model_validate(record)
    except ValidationError as exc:
        fields = [".".join(str(part) for part in err["loc"]) or "record" for err in exc.errors()]
        raise MalformedEntry(position, "invalid " + ", ".join(fields)) from exc
    return MenuEntry(
        id=entry_id,
        name=item.name,
        price=format(item.price, "f"),
        description=item.description,
        image=item.image,
        category=item.category,
    )


def parse_menu(payload: Any, strict: bool = False) -> list[MenuEntry]:
    """Map a `{"menu": [...]}` body to entries with ids 1..n in menu order.

    Malformed records are skipped unless `strict`, in which case the first one
    aborts the whole import.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("menu"), list):
        raise FetchFailure("Menu service returned an unexpected response")

    entries: list[MenuEntry] = []
    for position, record in enumerate(payload["menu"]):
        try:
            entries.append(to_entry(record, entry_id=len(entries) + 1, position=position))
        except MalformedEntry as exc:
            if strict:
                raise
            logger.warning("menu_record_skipped position=%d reason=%s", position, exc.reason)
    return entries


class MenuSource:
    """Fetches the menu from a fixed URL."""

    def __init__(
        self,
        base_url: str = MENU_URL,
        *,
        strict: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.strict = strict
        self._transport = transport

    async def fetch_menu(self) -> list[MenuEntry]:
        logger.info("menu_fetch url=%s", self.base_url)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self.base_url)
                response.raise_for_status()
            payload = response.json(parse_float=Decimal)
        except httpx.HTTPError as exc:
            raise FetchFailure(f"Could not load the menu: {exc}") from exc
        except ValueError as exc:
            raise FetchFailure("Menu service returned invalid JSON") from exc
        return parse_menu(payload, strict=self.strict)
