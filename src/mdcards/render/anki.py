"""Anki plain-text import rendering (semicolon separated, HTML enabled)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from ..models import Card, ContentBlock
from .html import block_to_html, new_id_counter

SEPARATOR = ";"


def anki_header(notetype: str = "Basic") -> list[str]:
    """File header lines understood by Anki's text importer."""
    return [
        "#separator:Semicolon",
        "#html:true",
        "#columns:Front;Back",
        f"#notetype:{notetype}",
    ]


def _field(blocks: Sequence[ContentBlock], ids: Iterator[int]) -> str:
    html = "".join("".join(block_to_html(block, ids)) for block in blocks)
    return '"' + html.replace('"', '""') + '"'


def card_to_anki(card: Card, ids: Iterator[int]) -> str:
    """One ``"front";"back"`` record."""
    return _field(card.front_blocks, ids) + SEPARATOR + _field(card.back_blocks, ids)


def render_anki(cards: Iterable[Card], notetype: str = "Basic") -> str:
    """Render cards as an Anki import file."""
    ids = new_id_counter()
    output = [*anki_header(notetype), ""]
    output.extend(card_to_anki(card, ids) for card in cards)
    return "\n".join(output) + "\n"
