"""Convert Markdown flashcard documents into learning cards for study tools."""

from .exceptions import (
    ConfigurationError,
    DocumentReadError,
    ExportError,
    InvalidBlockError,
    MdCardsError,
)
from .models import (
    Card,
    CardKind,
    ChoiceCard,
    ContentBlock,
    ElementTag,
    QuestionCard,
    SimpleCard,
)
from .parser import load_cards, parse_document
from .render import ExportFormat, export_cards, render_anki, render_html

__version__ = "0.1.0"

__all__ = [
    "Card",
    "CardKind",
    "ChoiceCard",
    "ConfigurationError",
    "ContentBlock",
    "DocumentReadError",
    "ElementTag",
    "ExportError",
    "ExportFormat",
    "InvalidBlockError",
    "MdCardsError",
    "QuestionCard",
    "SimpleCard",
    "export_cards",
    "load_cards",
    "parse_document",
    "render_anki",
    "render_html",
]
