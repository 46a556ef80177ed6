"""Rendering helpers for menu sections and filter toggles."""

from __future__ import annotations

from rich.text import Text

from menu_app.config import IMAGE_URL_TEMPLATE
from menu_app.constant import DEFAULT_BADGE_STYLE, SECTION_BADGE_STYLES, SECTION_LABELS
from menu_app.models import MenuEntry, Section


def badge_style(category: str) -> str:
    """Return a consistent badge style for a section."""
    return SECTION_BADGE_STYLES.get(category, DEFAULT_BADGE_STYLE)


def section_title(category: str) -> str:
    return SECTION_LABELS.get(category, category.replace("_", " ").title())


def format_price(entry: MenuEntry) -> str:
    return f"${entry.price}"


def image_url(image: str) -> str:
    """Resolve an image reference to a full URL; absolute URLs pass through."""
    if image.startswith(("http://", "https://")):
        return image
    return IMAGE_URL_TEMPLATE.format(image=image)


def format_filter_label(category: str, selected: bool) -> str:
    marker = "●" if selected else "○"
    return f"{marker} {section_title(category)}"


def format_entry(entry: MenuEntry) -> Text:
    """Render one menu row: name, description, price."""
    text = Text()
    text.append(entry.name, style="bold")
    if entry.image:
        text.append(" [photo]", style=f"dim link {image_url(entry.image)}")
    if entry.description:
        text.append(f"\n  {entry.description}", style="#495e57")
    text.append(f"\n  {format_price(entry)}", style="#ee9972")
    return text


def format_sections(sections: list[Section]) -> Text:
    if not sections:
        return Text("No results", style="dim")

    text = Text()
    for idx, section in enumerate(sections):
        if idx > 0:
            text.append("\n\n")
        text.append(f" {section_title(section.name)} ", style=badge_style(section.name))
        for entry in section.items:
            text.append("\n")
            text.append_text(format_entry(entry))
    return text
