"""Content blocks: the classified, contiguous units of card content.

Blocks are immutable. The formatting passes build new blocks through
``rewrite_text`` instead of mutating existing ones.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TypeAlias, TypeVar, assert_never

from .tags import ElementTag


@dataclass(frozen=True)
class Heading:
    """Heading line. ``stripped_tag`` holds the inner text of a trailing ``{...}``."""

    level: int
    text: str
    stripped_tag: str = ""

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Heading level must be positive, got {self.level}")

    @property
    def element_tag(self) -> ElementTag:
        return ElementTag.HEADING


@dataclass(frozen=True)
class TextBlock:
    """Paragraph of consecutive text lines, kept verbatim."""

    lines: tuple[str, ...]

    @property
    def element_tag(self) -> ElementTag:
        return ElementTag.TEXT_BLOCK


@dataclass(frozen=True)
class BulletList:
    """Unordered list; items have their marker removed."""

    items: tuple[str, ...]

    @property
    def element_tag(self) -> ElementTag:
        return ElementTag.BULLET_LIST


@dataclass(frozen=True)
class OrderedList:
    """Numbered list; items have their number prefix removed."""

    items: tuple[str, ...]

    @property
    def element_tag(self) -> ElementTag:
        return ElementTag.ORDERED_LIST


@dataclass(frozen=True)
class ChoiceOption:
    """One multiple choice answer and whether it is correct."""

    is_correct: bool
    text: str

    @property
    def element_tag(self) -> ElementTag:
        return ElementTag.RIGHT_ANSWER if self.is_correct else ElementTag.WRONG_ANSWER


ContentBlock: TypeAlias = Heading | TextBlock | BulletList | OrderedList | ChoiceOption

BlockT = TypeVar("BlockT", bound=ContentBlock)


def rewrite_text(block: BlockT, rewrite: Callable[[str], str]) -> BlockT:
    """Return a copy of ``block``, of the same variant, with ``rewrite`` applied to its text."""
    match block:
        case Heading():
            return replace(block, text=rewrite(block.text))
        case TextBlock():
            return replace(block, lines=tuple(rewrite(line) for line in block.lines))
        case BulletList() | OrderedList():
            return replace(block, items=tuple(rewrite(item) for item in block.items))
        case ChoiceOption():
            return replace(block, text=rewrite(block.text))
        case _:
            assert_never(block)


def to_markdown(block: ContentBlock) -> str:
    """Canonical string rendering of a block.

    Lists and choice options keep their markers, so the rendering parses
    back into an equivalent block.
    """
    match block:
        case Heading():
            return f"{'#' * block.level} {block.text}"
        case TextBlock():
            return "\n".join(block.lines)
        case BulletList():
            return "\n".join(f"- {item}" for item in block.items)
        case OrderedList():
            return "\n".join(
                f"{number}. {item}" for number, item in enumerate(block.items, start=1)
            )
        case ChoiceOption():
            return ("[x] " if block.is_correct else "[ ] ") + block.text
        case _:
            assert_never(block)
