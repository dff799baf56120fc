"""Markdown card parsing pipeline."""

from .builder import build_card, split_front_back
from .inline import apply_inline_passes, format_inline, resolve_links
from .lexer import (
    RawSegment,
    classify_line,
    parse_blocks,
    parse_heading,
    resolve_card_kind,
    split_into_segments,
)
from .loader import load_cards, parse_document, read_document

__all__ = [
    "RawSegment",
    "apply_inline_passes",
    "build_card",
    "classify_line",
    "format_inline",
    "load_cards",
    "parse_blocks",
    "parse_document",
    "parse_heading",
    "read_document",
    "resolve_card_kind",
    "resolve_links",
    "split_front_back",
    "split_into_segments",
]
