"""Data model: line/card classifications, content blocks and cards."""

from .cards import Card, ChoiceCard, QuestionCard, SimpleCard
from .content import (
    BulletList,
    ChoiceOption,
    BlockT,
    ContentBlock,
    Heading,
    OrderedList,
    TextBlock,
    rewrite_text,
    to_markdown,
)
from .tags import CardKind, ElementTag

__all__ = [
    "BlockT",
    "BulletList",
    "Card",
    "CardKind",
    "ChoiceCard",
    "ChoiceOption",
    "ContentBlock",
    "ElementTag",
    "Heading",
    "OrderedList",
    "QuestionCard",
    "SimpleCard",
    "TextBlock",
    "rewrite_text",
    "to_markdown",
]
