"""Line classification, card segmentation and block parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import (
    BulletList,
    CardKind,
    ChoiceOption,
    ContentBlock,
    ElementTag,
    Heading,
    OrderedList,
    TextBlock,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)

HEADING_PATTERN = re.compile(r"#+ .*")
BULLET_PATTERN = re.compile(r"[-*+] .*")
ORDERED_PATTERN = re.compile(r"\d+\. .*")
HEADING_TAG_PATTERN = re.compile(r"\{.*\}$")

CARD_START = "# "
WRONG_ANSWER_PREFIX = "[ ] "
RIGHT_ANSWER_PREFIX = "[x] "

# Checked in order; the first matching suffix wins.
KIND_MARKERS: tuple[tuple[str, CardKind], ...] = (
    (" {QUESTION}", CardKind.QUESTION),
    (" {CHOICE}", CardKind.CHOICE),
)


@dataclass
class RawSegment:
    """Lines of one card; the first line is its level-1 heading."""

    lines: list[str]
    kind: CardKind = CardKind.NONE


def classify_line(line: str) -> ElementTag:
    """Classify a single line. Every line maps to exactly one tag."""
    if HEADING_PATTERN.fullmatch(line):
        return ElementTag.HEADING
    if BULLET_PATTERN.fullmatch(line):
        return ElementTag.BULLET_LIST
    if ORDERED_PATTERN.fullmatch(line):
        return ElementTag.ORDERED_LIST
    if line.startswith(WRONG_ANSWER_PREFIX):
        return ElementTag.WRONG_ANSWER
    if line.startswith(RIGHT_ANSWER_PREFIX):
        return ElementTag.RIGHT_ANSWER
    if line == "":
        return ElementTag.EMPTY_LINE
    return ElementTag.TEXT_BLOCK


def split_into_segments(lines: list[str]) -> list[RawSegment]:
    """Split a document into card segments at level-1 headings.

    Lines before the first level-1 heading belong to no card and are dropped.
    """
    segments: list[RawSegment] = []
    current: RawSegment | None = None

    for line in lines:
        if line.startswith(CARD_START):
            current = RawSegment(lines=[line])
            segments.append(current)
        elif current is not None:
            current.lines.append(line)

    return segments


def resolve_card_kind(segment: RawSegment) -> RawSegment:
    """Read the kind marker off the segment's heading and strip it."""
    heading = segment.lines[0].rstrip()
    kind = CardKind.NONE

    for marker, marker_kind in KIND_MARKERS:
        if heading.endswith(marker):
            kind = marker_kind
            heading = heading[: -len(marker)]
            break

    return RawSegment(lines=[heading, *segment.lines[1:]], kind=kind)


def parse_heading(line: str) -> Heading:
    """Parse a heading line into its level, text and trailing ``{...}`` tag."""
    level = len(line) - len(line.lstrip("#"))
    text = line.partition(" ")[2].strip()

    stripped_tag = ""
    match = HEADING_TAG_PATTERN.search(text)
    if match:
        stripped_tag = match.group()[1:-1]
        text = text[: match.start()].rstrip()

    return Heading(level=level, text=text, stripped_tag=stripped_tag)


def _strip_list_marker(line: str) -> str:
    # "12. item" -> "item"
    return line.split(" ", 1)[1]


def parse_blocks(segment: RawSegment) -> tuple[Heading, list[ContentBlock]]:
    """Group a segment's lines into content blocks.

    Line 0 is always the card heading. Runs of bullet, ordered or text lines
    become one block each; choice answers and sub-headings are one block per
    line; empty lines only separate blocks.
    """
    lines = segment.lines
    heading = parse_heading(lines[0])
    blocks: list[ContentBlock] = []

    def take_run(start: int, tag: ElementTag) -> int:
        end = start
        while end < len(lines) and classify_line(lines[end]) is tag:
            end += 1
        return end

    index = 1
    while index < len(lines):
        line = lines[index]
        tag = classify_line(line)

        match tag:
            case ElementTag.HEADING:
                blocks.append(parse_heading(line))
                index += 1
            case ElementTag.BULLET_LIST:
                end = take_run(index, tag)
                blocks.append(BulletList(items=tuple(item[2:] for item in lines[index:end])))
                index = end
            case ElementTag.ORDERED_LIST:
                end = take_run(index, tag)
                blocks.append(
                    OrderedList(items=tuple(_strip_list_marker(item) for item in lines[index:end]))
                )
                index = end
            case ElementTag.WRONG_ANSWER | ElementTag.RIGHT_ANSWER:
                blocks.append(
                    ChoiceOption(is_correct=tag is ElementTag.RIGHT_ANSWER, text=line[4:])
                )
                index += 1
            case ElementTag.EMPTY_LINE:
                index += 1
            case ElementTag.TEXT_BLOCK:
                end = take_run(index, tag)
                blocks.append(TextBlock(lines=tuple(lines[index:end])))
                index = end

    logger.debug(
        "segment_parsed",
        title=heading.text,
        kind=segment.kind.value,
        blocks=len(blocks),
    )
    return heading, blocks
