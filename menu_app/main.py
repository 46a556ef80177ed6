"""Entry point for the Little Lemon menu app."""

from __future__ import annotations

import logging
from pathlib import Path

from menu_app.config import LOG_LEVEL, LOG_PATH
from menu_app.home import HomeApp


def configure_logging(path: str | Path = LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send log records to a file; the terminal belongs to the UI."""
    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    HomeApp().run()


if __name__ == "__main__":
    main()
