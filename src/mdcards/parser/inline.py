"""Inline Markdown emphasis and link rewriting to HTML markup."""

from __future__ import annotations

import re

from ..models import BlockT, rewrite_text

# (markdown delimiter, html tag, split pattern), applied in this order.
# Single-character delimiters skip runs of the same character, so the
# leftovers of an unterminated ``**`` or double backtick are not split.
INLINE_FORMATS: tuple[tuple[str, str, re.Pattern[str]], ...] = (
    ("**", "b", re.compile(r"\*\*")),
    ("*", "em", re.compile(r"(?<!\*)\*(?!\*)")),
    ("~~", "s", re.compile(r"~~")),
    ("``", "code", re.compile(r"``")),
    ("`", "code", re.compile(r"(?<!`)`(?!`)")),
)

# URLs may hold one level of balanced parentheses
_URL = r"\(((?:[^()]|\([^()]*\))*)\)"

# Empty, single-character and multi-character link text, in priority order
LINK_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\[()\]" + _URL),
    re.compile(r"\[([^\]])\]" + _URL),
    re.compile(r"\[([^\]]{2,})\]" + _URL),
)


def replace_inline_formatting(
    line: str, delimiter: str, html_tag: str, pattern: re.Pattern[str] | None = None
) -> str:
    """Replace paired ``delimiter`` occurrences in ``line`` with ``html_tag`` markup.

    ``pattern`` decides where the line is split and defaults to the literal
    delimiter. An unmatched trailing delimiter is kept literally. A line with
    fewer than two delimiters is returned unchanged.
    """
    if pattern is None:
        pattern = re.compile(re.escape(delimiter))

    # sentinels keep fragments at the start/end of the line non-empty
    splits = pattern.split(f"[{line}]")
    if len(splits) <= 2:
        return line

    parts: list[str] = []
    for i in range(0, len(splits) - 2, 2):
        parts.append(f"{splits[i]}<{html_tag}>{splits[i + 1]}</{html_tag}>")

    if len(splits) % 2 == 0:
        parts.append(splits[-2] + delimiter)
    parts.append(splits[-1])

    return "".join(parts)[1:-1]


def format_inline(line: str) -> str:
    """Apply every inline format to ``line``, outermost delimiter first."""
    for delimiter, html_tag, pattern in INLINE_FORMATS:
        line = replace_inline_formatting(line, delimiter, html_tag, pattern)
    return line


def resolve_links(line: str) -> str:
    """Rewrite every ``[text](url)`` in ``line`` to an ``<a href>`` tag."""
    while True:
        for pattern in LINK_PATTERNS:
            match = pattern.search(line)
            if match:
                text, url = match.groups()
                line = f'{line[: match.start()]}<a href="{url}">{text}</a>{line[match.end() :]}'
                break
        else:
            return line


def apply_inline_passes(block: BlockT) -> BlockT:
    """Run the formatting pass and then the link pass over a block's text."""
    formatted = rewrite_text(block, format_inline)
    return rewrite_text(formatted, resolve_links)
