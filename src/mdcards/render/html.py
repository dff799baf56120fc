"""HTML rendering of content blocks and card documents."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import assert_never

from ..models import (
    BulletList,
    Card,
    ChoiceOption,
    ContentBlock,
    Heading,
    OrderedList,
    TextBlock,
)


def new_id_counter() -> Iterator[int]:
    """Checkbox id source for one render call."""
    return itertools.count(1)


def block_to_html(block: ContentBlock, ids: Iterator[int]) -> list[str]:
    """Render a block as HTML lines. Choice options draw their id from ``ids``."""
    match block:
        case Heading():
            return [f"<h{block.level}>{block.text}</h{block.level}>"]
        case TextBlock():
            if not block.lines:
                return ["<p></p>"]
            return [
                "<p>",
                *(f"{line}<br>" for line in block.lines[:-1]),
                block.lines[-1],
                "</p>",
            ]
        case BulletList():
            return ["<ul>", *(f"  <li>{item}</li>" for item in block.items), "</ul>"]
        case OrderedList():
            return ["<ol>", *(f"  <li>{item}</li>" for item in block.items), "</ol>"]
        case ChoiceOption():
            element_id = f"cElem{next(ids)}"
            return [
                f'<input type="checkbox" id="{element_id}">',
                f'<label for="{element_id}"> {block.text}</label><br>',
            ]
        case _:
            assert_never(block)


def card_to_html(card: Card, ids: Iterator[int]) -> list[str]:
    """Front blocks followed by back blocks of one card."""
    output: list[str] = []
    for block in (*card.front_blocks, *card.back_blocks):
        output.extend(block_to_html(block, ids))
    return output


def render_html(cards: Iterable[Card], lang: str = "en") -> str:
    """Render cards as a standalone HTML document."""
    ids = new_id_counter()
    output = [
        f'<html lang="{lang}">',
        "<head>",
        '  <meta http-equiv="content-type" content="text/html" charset="utf-8">',
        "</head>",
        "",
        "<body>",
    ]
    for card in cards:
        output.extend(card_to_html(card, ids))
        output.append("<br>")
    output.extend(["</body>", "</html>"])
    return "\n".join(output) + "\n"
