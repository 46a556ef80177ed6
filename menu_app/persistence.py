"""SQLite cache for the restaurant menu."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Collection, Iterable, Iterator

from menu_app.config import DB_PATH
from menu_app.errors import StorageFailure
from menu_app.filtering import name_matches
from menu_app.models import MenuEntry

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, price, description, image, category"


def _row_to_entry(row: tuple) -> MenuEntry:
    entry_id, name, price, description, image, category = row
    return MenuEntry(
        id=int(entry_id),
        name=name,
        price=price,
        description=description,
        image=image,
        category=category,
    )


class MenuStore:
    """Menu rows cached in a local SQLite file.

    Every call opens its own connection, so a store may be used from worker
    threads as long as calls do not overlap.
    """

    def __init__(self, db_path: str | Path = DB_PATH) -> None:
        self.db_path = Path(db_path)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.Error) as exc:
            raise StorageFailure(f"Could not open menu database: {exc}") from exc
        try:
            conn.create_function("contains_text", 2, name_matches, deterministic=True)
            yield conn
        except sqlite3.Error as exc:
            raise StorageFailure(f"Menu database error: {exc}") from exc
        finally:
            conn.close()

    def ensure_schema(self) -> None:
        """Create the menu table if it does not already exist."""
        with self._connect() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS menuitems (
                    id INTEGER PRIMARY KEY,
                    name TEXT NOT NULL,
                    price TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    image TEXT NOT NULL DEFAULT '',
                    category TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_menuitems_category
                    ON menuitems(category);
                """
            )

    def is_empty(self) -> bool:
        with self._connect() as conn:
            row = conn.execute("SELECT EXISTS (SELECT 1 FROM menuitems)").fetchone()
        return not row[0]

    def bulk_insert(self, entries: Iterable[MenuEntry]) -> int:
        """Insert all entries in one transaction and return the row count.

        A failing row rolls back the whole batch.
        """
        rows = [
            (entry.id, entry.name, entry.price, entry.description, entry.image, entry.category)
            for entry in entries
        ]
        with self._connect() as conn:
            with conn:
                conn.executemany(f"INSERT INTO menuitems ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)", rows)
        logger.info("menu_cached rows=%d", len(rows))
        return len(rows)

    def categories(self) -> list[str]:
        """Distinct categories in order of first appearance."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT category FROM menuitems GROUP BY category ORDER BY MIN(id)"
            ).fetchall()
        return [row[0] for row in rows]

    def query(self, text: str, categories: Collection[str]) -> list[MenuEntry]:
        """Entries whose name contains `text` and whose category is listed, by id."""
        if not categories:
            return []
        placeholders = ", ".join("?" for _ in categories)
        with self._connect() as conn:
            rows = conn.execute(
                f"""
                SELECT {_COLUMNS} FROM menuitems
                WHERE contains_text(name, ?) AND category IN ({placeholders})
                ORDER BY id
                """,
                (text, *categories),
            ).fetchall()
        return [_row_to_entry(row) for row in rows]
