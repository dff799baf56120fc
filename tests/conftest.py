"""Pytest configuration and fixtures for the test suite."""

import pytest

from mdcards.config import reset_settings

QUESTION_DOCUMENT = "# Capital {QUESTION}\nWhat is the capital of France?\n\nParis\n"

CHOICE_DOCUMENT = "# Pick {CHOICE}\n[x] Correct\n[ ] Wrong\n"

MIXED_DOCUMENT = """Notes before the first card are ignored.

# Plain card
Some **bold** text
spanning two lines.

- first
- second

# Capital {QUESTION}
What is the capital of France?

Paris

# Sides {QUESTION}
## Prompt {FRONT}
Name a prime.
## Solution {BACK}
1. Two
2. Three

# Pick {CHOICE}
Which one is right?
[x] Correct [docs](https://example.com)
[ ] Wrong
"""


@pytest.fixture
def question_document():
    """Single question card without side markers."""
    return QUESTION_DOCUMENT


@pytest.fixture
def choice_document():
    """Single multiple choice card."""
    return CHOICE_DOCUMENT


@pytest.fixture
def mixed_document():
    """Document with one card of every kind plus leading notes."""
    return MIXED_DOCUMENT


@pytest.fixture
def cards_file(tmp_path, mixed_document):
    """Markdown card file on disk."""
    path = tmp_path / "cards.md"
    path.write_text(mixed_document, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_settings():
    """Drop cached settings between tests."""
    reset_settings()
    yield
    reset_settings()
