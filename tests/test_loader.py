"""Tests for document parsing and loading."""

import pytest

from mdcards.error_codes import ErrorCode
from mdcards.exceptions import DocumentReadError
from mdcards.models import (
    BulletList,
    ChoiceCard,
    ChoiceOption,
    Heading,
    OrderedList,
    QuestionCard,
    SimpleCard,
    TextBlock,
)
from mdcards.parser import load_cards, parse_document


class TestParseDocument:
    """End-to-end parsing of card documents."""

    def test_question_card(self, question_document) -> None:
        cards = parse_document(question_document)

        assert len(cards) == 1
        card = cards[0]
        assert isinstance(card, QuestionCard)
        assert card.heading.text == "Capital"
        assert card.front == (TextBlock(lines=("What is the capital of France?",)),)
        assert card.back_content() == ["Paris"]

    def test_choice_card(self, choice_document) -> None:
        cards = parse_document(choice_document)

        assert len(cards) == 1
        card = cards[0]
        assert isinstance(card, ChoiceCard)
        assert [option.is_correct for option in card.choices] == [True, False]
        assert card.blocks == (
            ChoiceOption(is_correct=True, text="Correct"),
            ChoiceOption(is_correct=False, text="Wrong"),
        )

    def test_mixed_document(self, mixed_document) -> None:
        plain, capital, sides, pick = parse_document(mixed_document)

        assert isinstance(plain, SimpleCard)
        assert plain.back == (
            TextBlock(lines=("Some <b>bold</b> text", "spanning two lines.")),
            BulletList(items=("first", "second")),
        )

        assert isinstance(capital, QuestionCard)
        assert capital.back_content() == ["Paris"]

        assert isinstance(sides, QuestionCard)
        assert sides.front == (
            Heading(level=2, text="Prompt", stripped_tag="FRONT"),
            TextBlock(lines=("Name a prime.",)),
        )
        assert sides.back == (
            Heading(level=2, text="Solution", stripped_tag="BACK"),
            OrderedList(items=("Two", "Three")),
        )

        assert isinstance(pick, ChoiceCard)
        assert pick.choices[0].text == 'Correct <a href="https://example.com">docs</a>'
        assert pick.front_content() == [
            "# Pick",
            '[x] Correct <a href="https://example.com">docs</a>',
            "[ ] Wrong",
        ]

    @pytest.mark.parametrize(
        "document",
        [
            "",
            "no headings at all\n",
            "# One\n",
            "# One\n## not a card\n# Two {QUESTION}\n# Three {CHOICE}\ntext\n",
            "intro\n#not-a-card\n# Real\n",
        ],
    )
    def test_card_count_matches_level_one_headings(self, document) -> None:
        expected = sum(1 for line in document.splitlines() if line.startswith("# "))

        assert len(parse_document(document)) == expected

    def test_heading_is_formatted(self) -> None:
        (card,) = parse_document("# **Bold** [title](u)\n")

        assert card.heading.text == '<b>Bold</b> <a href="u">title</a>'

    def test_unicode_separators_stay_in_line(self) -> None:
        (card,) = parse_document("# A\nx\u2028y\x0cz\n")

        assert card.back == (TextBlock(lines=("x\u2028y\x0cz",)),)

    def test_crlf_and_cr_line_endings(self) -> None:
        (card,) = parse_document("# A\r\nfirst\rsecond\r\n")

        assert card.heading.text == "A"
        assert card.back == (TextBlock(lines=("first", "second")),)

    def test_question_partition_covers_all_blocks(self, mixed_document) -> None:
        for card in parse_document(mixed_document):
            if isinstance(card, QuestionCard):
                assert len(card.front) + len(card.back) == len(set(card.front + card.back))


class TestLoadCards:
    """Reading documents from disk."""

    def test_load_cards(self, cards_file) -> None:
        cards = load_cards(cards_file)

        assert [card.name for card in cards] == [
            "SimpleCard",
            "QuestionCard",
            "QuestionCard",
            "ChoiceCard",
        ]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(DocumentReadError) as exc_info:
            load_cards(tmp_path / "missing.md")

        assert exc_info.value.error_code == ErrorCode.DOC_NOT_FOUND.value

    def test_directory(self, tmp_path) -> None:
        with pytest.raises(DocumentReadError) as exc_info:
            load_cards(tmp_path)

        assert exc_info.value.error_code == ErrorCode.DOC_NOT_A_FILE.value

    def test_undecodable_file(self, tmp_path) -> None:
        path = tmp_path / "bad.md"
        path.write_bytes(b"# Title\n\xff\xfe\xfa\n")

        with pytest.raises(DocumentReadError) as exc_info:
            load_cards(path)

        assert exc_info.value.error_code == ErrorCode.DOC_DECODE_FAILED.value
        assert exc_info.value.suggestion
