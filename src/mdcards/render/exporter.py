"""Write rendered cards to disk."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from ..error_codes import ErrorCode
from ..exceptions import ExportError
from ..models import Card
from ..utils.io import atomic_write
from ..utils.logging import get_logger
from .anki import render_anki
from .html import render_html

logger = get_logger(__name__)


class ExportFormat(str, Enum):
    """Supported output formats."""

    HTML = "html"
    ANKI = "anki"

    @property
    def suffix(self) -> str:
        return ".html" if self is ExportFormat.HTML else ".txt"


def render_cards(
    cards: Sequence[Card],
    fmt: ExportFormat,
    html_lang: str = "en",
    anki_notetype: str = "Basic",
) -> str:
    """Render cards in the requested format."""
    match fmt:
        case ExportFormat.HTML:
            return render_html(cards, lang=html_lang)
        case ExportFormat.ANKI:
            return render_anki(cards, notetype=anki_notetype)
    raise ExportError(
        f"Unsupported export format: {fmt}",
        error_code=ErrorCode.EXP_UNKNOWN_FORMAT.value,
    )


def export_cards(
    cards: Sequence[Card],
    output: Path,
    fmt: ExportFormat = ExportFormat.HTML,
    *,
    overwrite: bool = False,
    html_lang: str = "en",
    anki_notetype: str = "Basic",
    encoding: str = "utf-8",
) -> Path:
    """Render ``cards`` and write them atomically to ``output``.

    Raises:
        ExportError: If ``output`` exists and ``overwrite`` is False, or the
            file cannot be written
    """
    if output.exists() and not overwrite:
        raise ExportError(
            f"A file with the given name already exists: {output}",
            suggestion="Choose another output path or pass --overwrite.",
            error_code=ErrorCode.EXP_FILE_EXISTS.value,
            context={"output": str(output)},
        )

    content = render_cards(cards, fmt, html_lang=html_lang, anki_notetype=anki_notetype)

    try:
        with atomic_write(output, encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise ExportError(
            f"There was an error creating the file: {output}",
            error_code=ErrorCode.EXP_WRITE_FAILED.value,
            context={"output": str(output), "error": str(e)},
        ) from e

    logger.info(
        "export_completed",
        output=str(output),
        format=fmt.value,
        cards=len(cards),
    )
    return output
