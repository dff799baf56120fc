"""Load a Markdown card document into a list of learning cards."""

from __future__ import annotations

import re
from pathlib import Path

from ..error_codes import ErrorCode
from ..exceptions import DocumentReadError
from ..models import Card
from ..utils.logging import get_logger
from .builder import build_card
from .inline import apply_inline_passes
from .lexer import parse_blocks, resolve_card_kind, split_into_segments

logger = get_logger(__name__)

# Only newline sequences end a line; form feeds and Unicode separators stay in text
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines, without a trailing empty line."""
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_document(text: str) -> list[Card]:
    """Parse Markdown card source into cards, one per level-1 heading."""
    cards: list[Card] = []

    for raw_segment in split_into_segments(split_lines(text)):
        segment = resolve_card_kind(raw_segment)
        heading, blocks = parse_blocks(segment)

        heading = apply_inline_passes(heading)
        blocks = [apply_inline_passes(block) for block in blocks]

        cards.append(build_card(segment.kind, heading, blocks))

    logger.debug("cards_parsed", cards=len(cards))
    return cards


def read_document(file_path: Path, encoding: str = "utf-8") -> str:
    """Read a card document.

    Raises:
        DocumentReadError: If the path is missing, not a file, or unreadable
    """
    if not file_path.exists():
        raise DocumentReadError(
            f"File does not exist: {file_path}",
            error_code=ErrorCode.DOC_NOT_FOUND.value,
            context={"file": str(file_path)},
        )
    if not file_path.is_file():
        raise DocumentReadError(
            f"Path is not a file: {file_path}",
            error_code=ErrorCode.DOC_NOT_A_FILE.value,
            context={"file": str(file_path)},
        )

    try:
        return file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(
            f"Failed to read file {file_path}: {e}",
            suggestion=f"Check that the file is readable and encoded as {encoding}.",
            error_code=ErrorCode.DOC_DECODE_FAILED.value,
            context={"file": str(file_path), "encoding": encoding},
        ) from e


def load_cards(file_path: Path, encoding: str = "utf-8") -> list[Card]:
    """Read and parse a card document.

    Raises:
        DocumentReadError: If the document cannot be read
    """
    cards = parse_document(read_document(file_path, encoding=encoding))
    logger.info("document_loaded", file=str(file_path), cards=len(cards))
    return cards
