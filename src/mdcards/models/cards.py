"""Learning cards: the terminal output of the parsing pipeline."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TypeAlias

from ..error_codes import ErrorCode
from ..exceptions import InvalidBlockError
from .content import ChoiceOption, ContentBlock, Heading, to_markdown
from .tags import CardKind


class _CardMixin:
    """Shared read-only views over a card's front and back blocks."""

    heading: Heading
    kind: CardKind

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def front_blocks(self) -> tuple[ContentBlock, ...]:
        raise NotImplementedError

    @property
    def back_blocks(self) -> tuple[ContentBlock, ...]:
        raise NotImplementedError

    def front_content(self) -> list[str]:
        """Canonical renderings of the front side."""
        return [to_markdown(block) for block in self.front_blocks]

    def back_content(self) -> list[str]:
        """Canonical renderings of the back side."""
        return [to_markdown(block) for block in self.back_blocks]

    def describe(self) -> list[str]:
        """Human-readable summary of the card, one entry per output line."""
        return [
            f"Type: {self.name}",
            "",
            "FrontContent:",
            *self.front_content(),
            "",
            "BackContent:",
            *self.back_content(),
        ]


@dataclass(frozen=True)
class SimpleCard(_CardMixin):
    """Card whose front is only its title and whose back is all content."""

    heading: Heading
    back: tuple[ContentBlock, ...] = ()

    kind = CardKind.NONE

    @property
    def front_blocks(self) -> tuple[ContentBlock, ...]:
        return (self.heading,)

    @property
    def back_blocks(self) -> tuple[ContentBlock, ...]:
        return self.back

    def with_front(self, block: ContentBlock) -> SimpleCard:
        """Return a copy whose title is replaced by ``block``.

        Raises:
            InvalidBlockError: If ``block`` is not a Heading
        """
        if not isinstance(block, Heading):
            raise InvalidBlockError(
                f"Given block has type {type(block).__name__}, but should be of type 'Heading'.",
                error_code=ErrorCode.CRD_FRONT_NOT_HEADING.value,
                context={"block_type": type(block).__name__, "card": self.heading.text},
            )
        return replace(self, heading=block)

    def with_back(self, blocks: Iterable[ContentBlock]) -> SimpleCard:
        return replace(self, back=(*self.back, *blocks))


@dataclass(frozen=True)
class QuestionCard(_CardMixin):
    """Card with a title plus separate front and back content."""

    heading: Heading
    front: tuple[ContentBlock, ...] = ()
    back: tuple[ContentBlock, ...] = ()

    kind = CardKind.QUESTION

    @property
    def front_blocks(self) -> tuple[ContentBlock, ...]:
        return (self.heading, *self.front)

    @property
    def back_blocks(self) -> tuple[ContentBlock, ...]:
        return self.back

    def with_front(self, blocks: Iterable[ContentBlock]) -> QuestionCard:
        return replace(self, front=(*self.front, *blocks))

    def with_back(self, blocks: Iterable[ContentBlock]) -> QuestionCard:
        return replace(self, back=(*self.back, *blocks))


@dataclass(frozen=True)
class ChoiceCard(_CardMixin):
    """Multiple choice card. The front shows the options, the back everything."""

    heading: Heading
    blocks: tuple[ContentBlock, ...] = ()

    kind = CardKind.CHOICE

    @property
    def choices(self) -> tuple[ChoiceOption, ...]:
        return tuple(block for block in self.blocks if isinstance(block, ChoiceOption))

    @property
    def front_blocks(self) -> tuple[ContentBlock, ...]:
        return (self.heading, *self.choices)

    @property
    def back_blocks(self) -> tuple[ContentBlock, ...]:
        return self.blocks

    def with_blocks(self, blocks: Iterable[ContentBlock]) -> ChoiceCard:
        return replace(self, blocks=(*self.blocks, *blocks))


Card: TypeAlias = SimpleCard | QuestionCard | ChoiceCard
