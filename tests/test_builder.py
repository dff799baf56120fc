"""Tests for front/back splitting and card construction."""

import pytest

from mdcards.models import (
    CardKind,
    ChoiceCard,
    ChoiceOption,
    Heading,
    QuestionCard,
    SimpleCard,
    TextBlock,
)
from mdcards.parser.builder import build_card, side_marker, split_front_back

TITLE = Heading(level=1, text="Title")


def text(value: str) -> TextBlock:
    return TextBlock(lines=(value,))


class TestSideMarker:
    """Sub-headings carrying FRONT/BACK switch sides."""

    def test_tag_marker(self) -> None:
        assert side_marker(Heading(level=2, text="Answer", stripped_tag="BACK")) == "BACK"
        assert side_marker(Heading(level=2, text="Q", stripped_tag="FRONT")) == "FRONT"

    def test_literal_suffix_marker(self) -> None:
        assert side_marker(Heading(level=2, text="Answer {BACK}")) == "BACK"

    def test_non_markers(self) -> None:
        assert side_marker(Heading(level=2, text="Answer", stripped_tag="OTHER")) is None
        assert side_marker(text("{BACK}")) is None


class TestSplitFrontBack:
    """Question card blocks are partitioned in order."""

    def test_without_markers_first_block_is_front(self) -> None:
        blocks = [text("q"), text("a1"), text("a2")]

        assert split_front_back(blocks) == ([text("q")], [text("a1"), text("a2")])

    def test_empty(self) -> None:
        assert split_front_back([]) == ([], [])

    def test_markers_switch_sides(self) -> None:
        front_marker = Heading(level=2, text="Prompt", stripped_tag="FRONT")
        back_marker = Heading(level=2, text="Solution", stripped_tag="BACK")
        blocks = [front_marker, text("q"), back_marker, text("a")]

        front, back = split_front_back(blocks)

        assert front == [front_marker, text("q")]
        assert back == [back_marker, text("a")]

    def test_blocks_before_first_marker_are_front(self) -> None:
        back_marker = Heading(level=2, text="Solution", stripped_tag="BACK")
        front_marker = Heading(level=2, text="More", stripped_tag="FRONT")
        blocks = [text("intro"), back_marker, text("a"), front_marker, text("q2")]

        front, back = split_front_back(blocks)

        assert front == [text("intro"), front_marker, text("q2")]
        assert back == [back_marker, text("a")]

    @pytest.mark.parametrize(
        "blocks",
        [
            [text("a"), text("b"), text("c")],
            [Heading(level=2, text="x", stripped_tag="BACK"), text("a")],
            [
                text("a"),
                Heading(level=3, text="y", stripped_tag="BACK"),
                ChoiceOption(is_correct=True, text="c"),
                Heading(level=3, text="z", stripped_tag="FRONT"),
                text("d"),
            ],
        ],
    )
    def test_partition_preserves_every_block(self, blocks) -> None:
        front, back = split_front_back(blocks)

        assert len(front) + len(back) == len(blocks)
        assert sorted(map(blocks.index, front + back)) == list(range(len(blocks)))
        assert front == [b for b in blocks if b in front]
        assert back == [b for b in blocks if b in back]


class TestBuildCard:
    """Card variant follows the resolved kind."""

    def test_simple_card(self) -> None:
        card = build_card(CardKind.NONE, TITLE, [text("a")])

        assert card == SimpleCard(heading=TITLE, back=(text("a"),))
        assert card.front_blocks == (TITLE,)

    def test_question_card(self) -> None:
        card = build_card(CardKind.QUESTION, TITLE, [text("q"), text("a")])

        assert isinstance(card, QuestionCard)
        assert card.front == (text("q"),)
        assert card.back == (text("a"),)
        assert card.front_blocks == (TITLE, text("q"))

    def test_choice_card(self) -> None:
        right = ChoiceOption(is_correct=True, text="r")
        wrong = ChoiceOption(is_correct=False, text="w")
        card = build_card(CardKind.CHOICE, TITLE, [text("prompt"), right, wrong])

        assert isinstance(card, ChoiceCard)
        assert card.choices == (right, wrong)
        assert card.front_blocks == (TITLE, right, wrong)
        assert card.back_blocks == (text("prompt"), right, wrong)
