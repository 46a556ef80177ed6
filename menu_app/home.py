"""Home screen: search and browse the cached menu."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Header, Input, Static
from textual.worker import Worker

from menu_app.config import DEBOUNCE_SECONDS, PROFILE_PATH
from menu_app.controller import MenuController, MenuFetcher
from menu_app.persistence import MenuStore
from menu_app.profile import load_profile
from menu_app.remote import MenuSource
from menu_app.rendering import format_filter_label, format_sections

logger = logging.getLogger(__name__)


class HomeApp(App):
    """Browse the restaurant menu from the local cache."""

    TITLE = "Little Lemon"
    SUB_TITLE = "Chicago"

    CSS = """
    Screen {
        layout: vertical;
    }

    #hero {
        height: auto;
        background: #495e57;
        color: #ffffff;
        padding: 1 2;
    }

    #search-bar {
        margin-top: 1;
    }

    #delivery {
        text-style: bold;
        color: #0b9a6a;
        padding: 1 2 0 2;
    }

    #filters {
        height: auto;
        padding: 0 1;
    }

    .filter {
        margin: 0 1;
    }

    #results-pane {
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    #status {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        *[Binding(f"f{n}", f"toggle_filter({n - 1})", f"Filter {n}", show=False) for n in range(1, 10)],
        ("ctrl+r", "reload", "Reload menu"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: MenuStore | None = None,
        source: MenuFetcher | None = None,
        *,
        profile_path: str | Path = PROFILE_PATH,
        debounce_delay: float = DEBOUNCE_SECONDS,
    ) -> None:
        super().__init__()
        self.profile_path = profile_path
        self._activation: Worker[None] | None = None
        self.controller = MenuController(
            store or MenuStore(),
            source or MenuSource(),
            self.set_timer,
            debounce_delay=debounce_delay,
            on_change=self._refresh_view,
            on_error=self._show_error,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="hero"):
            yield Static(
                "We are a family owned Mediterranean restaurant, focused on "
                "traditional recipes served with a modern twist.",
                id="hero-text",
            )
            yield Input(placeholder="Search", id="search-bar")
        yield Static("ORDER FOR DELIVERY!", id="delivery")
        with Horizontal(id="filters"):
            for idx, category in enumerate(self.controller.categories):
                yield Button(format_filter_label(category, False), id=f"filter-{idx}", classes="filter")
        with VerticalScroll(id="results-pane"):
            yield Static("Loading menu...", id="results")
        yield Static(id="status")

    def on_mount(self) -> None:
        profile = load_profile(self.profile_path)
        if profile is not None and profile.initials:
            self.sub_title = f"Chicago · {profile.initials}"
        self.query_one("#search-bar", Input).focus()
        self._start_activation()

    def on_unmount(self) -> None:
        self.controller.close()

    def _start_activation(self) -> None:
        self._activation = self.run_worker(self.controller.activate(), group="activate")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-bar":
            self.controller.on_text_changed(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("filter-"):
            return
        self.action_toggle_filter(int(button_id.removeprefix("filter-")))

    def action_toggle_filter(self, index: int) -> None:
        if not (0 <= index < len(self.controller.categories)):
            return
        # Queries wait for a running import; keep the message pump free for typing.
        self.run_worker(self.controller.toggle_category(index), group="filter")

    def action_reload(self) -> None:
        if self._activation is not None and not self._activation.is_finished:
            logger.info("reload_ignored reason=activation_running")
            return
        logger.info("reload_requested")
        self._start_activation()

    def _show_error(self, message: str) -> None:
        self.notify(message, title="Menu", severity="error")

    def _refresh_view(self) -> None:
        try:
            results = self.query_one("#results", Static)
            filters = self.query_one("#filters", Horizontal)
            status = self.query_one("#status", Static)
        except NoMatches:
            return

        self._refresh_filters(filters)

        if not self.controller.ready:
            results.update("Loading menu...")
        else:
            results.update(format_sections(self.controller.sections))

        state = self.controller.state
        if self.controller.error:
            status.update(self.controller.error)
        elif state.raw_text != state.committed_query:
            status.update(f"Searching for {state.raw_text!r}...")
        else:
            count = sum(len(section.items) for section in self.controller.sections)
            status.update(f"{count} items")

    def _refresh_filters(self, filters: Horizontal) -> None:
        buttons = list(filters.query(Button))
        for idx in range(len(buttons), len(self.controller.categories)):
            button = Button(
                format_filter_label(self.controller.categories[idx], False),
                id=f"filter-{idx}",
                classes="filter",
            )
            filters.mount(button)
            buttons.append(button)

        for idx, button in enumerate(buttons):
            selected = self.controller.state.selections[idx]
            button.label = format_filter_label(self.controller.categories[idx], selected)
            button.variant = "primary" if selected else "default"
