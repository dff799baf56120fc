"""Renderers that serialize parsed cards for study tools."""

from .anki import anki_header, card_to_anki, render_anki
from .exporter import ExportFormat, export_cards, render_cards
from .html import block_to_html, card_to_html, new_id_counter, render_html

__all__ = [
    "ExportFormat",
    "anki_header",
    "block_to_html",
    "card_to_anki",
    "card_to_html",
    "export_cards",
    "new_id_counter",
    "render_anki",
    "render_cards",
    "render_html",
]
