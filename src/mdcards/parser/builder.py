"""Front/back partitioning and card construction."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import (
    Card,
    CardKind,
    ChoiceCard,
    ContentBlock,
    Heading,
    QuestionCard,
    SimpleCard,
    to_markdown,
)

FRONT_MARKER = "FRONT"
BACK_MARKER = "BACK"


def side_marker(block: ContentBlock) -> str | None:
    """Return FRONT or BACK if ``block`` is a sub-heading that switches sides.

    The heading parser moves a trailing ``{FRONT}``/``{BACK}`` into
    ``stripped_tag``, so the tag is checked first. A literal suffix left in
    the rendered heading is still honoured.
    """
    if not isinstance(block, Heading):
        return None
    if block.stripped_tag in (FRONT_MARKER, BACK_MARKER):
        return block.stripped_tag

    rendered = to_markdown(block).rstrip()
    for marker in (FRONT_MARKER, BACK_MARKER):
        if rendered.endswith(f" {{{marker}}}"):
            return marker
    return None


def split_front_back(
    blocks: Sequence[ContentBlock],
) -> tuple[list[ContentBlock], list[ContentBlock]]:
    """Partition a question card's blocks into front and back, keeping order.

    Blocks go to the front until a ``{BACK}`` sub-heading and back again to the
    front after a ``{FRONT}`` one; marker headings stay on the side they open.
    Without any marker, the first block is the front and the rest the back.
    """
    if not any(side_marker(block) for block in blocks):
        return list(blocks[:1]), list(blocks[1:])

    front: list[ContentBlock] = []
    back: list[ContentBlock] = []
    is_front = True

    for block in blocks:
        marker = side_marker(block)
        if marker == FRONT_MARKER:
            is_front = True
        elif marker == BACK_MARKER:
            is_front = False

        (front if is_front else back).append(block)

    return front, back


def build_card(kind: CardKind, heading: Heading, blocks: Sequence[ContentBlock]) -> Card:
    """Construct the card variant for ``kind``."""
    match kind:
        case CardKind.NONE:
            return SimpleCard(heading=heading, back=tuple(blocks))
        case CardKind.QUESTION:
            front, back = split_front_back(blocks)
            return QuestionCard(heading=heading, front=tuple(front), back=tuple(back))
        case CardKind.CHOICE:
            return ChoiceCard(heading=heading, blocks=tuple(blocks))
    raise ValueError(f"Unknown card kind: {kind!r}")
