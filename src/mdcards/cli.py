"""Command-line interface for converting Markdown card files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .config import Settings, load_settings, set_settings
from .error_codes import ErrorCode
from .exceptions import ConfigurationError, MdCardsError
from .parser import load_cards
from .render import ExportFormat, export_cards
from .utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="mdcards",
    help="Convert Markdown flashcard files to HTML or Anki import files.",
    no_args_is_help=True,
)

console = Console()


def get_settings_and_logger(
    config_path: Path | None = None,
    log_level: str | None = None,
    verbose: bool = False,
) -> tuple[Settings, Any]:
    """Load settings and configure logging for a command invocation."""
    settings = load_settings(config_path)
    if log_level:
        try:
            settings.log_level = log_level
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid log level: {log_level}",
                error_code=ErrorCode.CFG_INVALID_VALUE.value,
            ) from e
    set_settings(settings)

    configure_logging(settings.log_level, log_file=settings.log_file, verbose=verbose)
    return settings, get_logger("mdcards.cli")


def _fail(logger: Any, event: str, error: MdCardsError) -> NoReturn:
    logger.error(event, **error.to_dict())
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")
    if error.suggestion:
        console.print(f"[yellow]Suggestion:[/yellow] {escape(error.suggestion)}")
    raise typer.Exit(code=1)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to a YAML config file", exists=True, dir_okay=False),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
]


@app.command()
def export(
    input_file: Annotated[Path, typer.Argument(help="Markdown card file to convert")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (derived from input if omitted)"),
    ] = None,
    file_format: Annotated[
        ExportFormat | None,
        typer.Option("--format", "-f", help="Output format: html or anki"),
    ] = None,
    overwrite: Annotated[
        bool, typer.Option("--overwrite", help="Replace an existing output file")
    ] = False,
    config_path: ConfigOption = None,
    log_level: LogLevelOption = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show all log messages")] = False,
) -> None:
    """Parse a Markdown card file and export it."""
    try:
        settings, logger = get_settings_and_logger(config_path, log_level, verbose)
    except MdCardsError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    fmt = file_format or ExportFormat(settings.default_format)
    output_path = output or input_file.with_suffix(fmt.suffix)

    try:
        cards = load_cards(input_file, encoding=settings.encoding)
        export_cards(
            cards,
            output_path,
            fmt,
            overwrite=overwrite or settings.overwrite,
            html_lang=settings.html_lang,
            anki_notetype=settings.anki_notetype,
            encoding=settings.encoding,
        )
    except MdCardsError as e:
        _fail(logger, "export_failed", e)

    console.print(
        f"[bold green]Exported {len(cards)} card(s) to {escape(str(output_path))}[/bold green]"
    )


@app.command()
def show(
    input_file: Annotated[Path, typer.Argument(help="Markdown card file to inspect")],
    config_path: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Print a summary of every card in a Markdown card file."""
    try:
        settings, logger = get_settings_and_logger(config_path, log_level)
    except MdCardsError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    try:
        cards = load_cards(input_file, encoding=settings.encoding)
    except MdCardsError as e:
        _fail(logger, "show_failed", e)

    for index, card in enumerate(cards, start=1):
        console.print(
            Panel(
                Text("\n".join(card.describe())),
                title=Text(f"{index}. {card.heading.text}", style="bold cyan"),
                expand=False,
            )
        )
    console.print(f"{len(cards)} card(s)")


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
