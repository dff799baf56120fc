"""Closed classification enums for lines, blocks and cards."""

from enum import Enum


class ElementTag(str, Enum):
    """Classification of a single source line or content block."""

    HEADING = "heading"
    TEXT_BLOCK = "text_block"
    BULLET_LIST = "bullet_list"
    ORDERED_LIST = "ordered_list"
    WRONG_ANSWER = "wrong_answer"
    RIGHT_ANSWER = "right_answer"
    EMPTY_LINE = "empty_line"


class CardKind(str, Enum):
    """Kind of a card, resolved from the marker on its level-1 heading."""

    NONE = "none"
    QUESTION = "question"
    CHOICE = "choice"

