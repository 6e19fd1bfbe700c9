"""ReportForge CLI - Main application entry point.

Commands read JSON exported by the data layer and print the text the
report assembler would hand to the layout engine.

Examples:
    reportforge authors pathway.json
    reportforge authors pathway.json --affiliations --plain
    reportforge references publications.json --format markdown
    reportforge shape "Jassal B" --escape
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.text import Text

from reportforge.authors import AuthorCollector, affiliation_block, cover_author_line
from reportforge.authors.collector import sorted_authors
from reportforge.citation import CitationFormatter, OutputFormat, render, to_rich_text
from reportforge.cli.console import get_console, print_error
from reportforge.core.config import Config, load_config
from reportforge.core.exceptions import ReportForgeError
from reportforge.core.logging import configure_logging, get_logger
from reportforge.domain import load_event, load_publications
from reportforge.shared.text_shaping import shape

logger = get_logger(__name__)

app = typer.Typer(
    name="reportforge",
    help="Author blocks and reference lists for generated reports",
    add_completion=False,
)


def _read_json(path: Path) -> Any:
    """Read and decode a JSON input file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _get_config(ctx: typer.Context) -> Config:
    if ctx.obj and "config" in ctx.obj:
        return ctx.obj["config"]
    return Config()


def _fail(error: Exception, operation: str) -> None:
    """Report a failed command and exit with code 1."""
    print_error(error)
    logger.error(f"[{operation}] {type(error).__name__}: {error}")
    raise typer.Exit(code=1)


def _event_data(data: Any) -> dict[str, Any]:
    if isinstance(data, dict) and isinstance(data.get("event"), dict):
        return data["event"]
    if not isinstance(data, dict):
        raise ReportForgeError("Event file must contain a JSON object")
    return data


def _publication_data(data: Any) -> list[dict[str, Any]]:
    if isinstance(data, dict):
        data = data.get("publications", data.get("literatureReference", []))
    if not isinstance(data, list):
        raise ReportForgeError("Publications file must contain a JSON list")
    return data


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to reportforge.yaml"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Author blocks and reference lists for generated reports."""
    try:
        config = load_config(config_path)
    except ReportForgeError as e:
        _fail(e, "load config")

    level = "DEBUG" if verbose else config.logging.level
    log_file = Path(config.logging.file) if config.logging.file else None
    configure_logging(level=level, log_file=log_file)
    ctx.obj = {"config": config}


@app.command("authors")
def authors_command(
    ctx: typer.Context,
    event_file: Path = typer.Argument(..., help="Event JSON file"),
    affiliations: bool = typer.Option(
        False, "--affiliations", "-a", help="Show affiliation indices and legend"
    ),
    plain: bool = typer.Option(
        False, "--plain", help="Print names without layout shaping"
    ),
) -> None:
    """Print the cover-page author line of an event."""
    config = _get_config(ctx)
    shaped = config.shaping.enabled and not plain
    try:
        event = load_event(_event_data(_read_json(event_file)))
        collector = AuthorCollector(strict_cycles=config.authors.strict_cycles)

        console = get_console()
        if not affiliations:
            line = cover_author_line(
                event, collector, shaped=shaped, separator=config.authors.separator
            )
            console.print(line, markup=False, soft_wrap=True)
            return

        people = sorted_authors(collector.collect(event))
        block = affiliation_block(
            people, shaped=shaped, separator=config.authors.separator
        )
        console.print(to_rich_text(block.fragments), soft_wrap=True)
        for line in block.legend():
            console.print(line, markup=False, soft_wrap=True)

    except (ReportForgeError, OSError, json.JSONDecodeError) as e:
        _fail(e, "authors")


@app.command("references")
def references_command(
    ctx: typer.Context,
    publications_file: Path = typer.Argument(..., help="Publications JSON file"),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT, "--format", "-f", help="Output format"
    ),
) -> None:
    """Print a numbered reference list."""
    config = _get_config(ctx)
    try:
        publications = load_publications(
            _publication_data(_read_json(publications_file))
        )
        citations = CitationFormatter(config.citation).format_all(publications)

        console = get_console()
        for number, citation in enumerate(citations, start=1):
            if format == OutputFormat.TEXT:
                line = Text(f"{number}. ")
                line.append_text(to_rich_text(citation))
                console.print(line, soft_wrap=True)
            else:
                rendered = render(citation, format)
                console.print(f"{number}. {rendered}", markup=False, soft_wrap=True)

        logger.debug("Formatted references", count=len(citations))

    except (ReportForgeError, OSError, json.JSONDecodeError) as e:
        _fail(e, "references")


@app.command("shape")
def shape_command(
    text: str = typer.Argument(..., help="Text to shape"),
    escape: bool = typer.Option(
        False, "--escape", "-e", help="Show code points instead of raw characters"
    ),
) -> None:
    """Shape text so a layout engine cannot break it."""
    shaped = shape(text)
    if escape:
        shaped = shaped.encode("unicode_escape").decode("ascii")
    get_console().print(shaped, markup=False, soft_wrap=True)


def cli_main() -> None:
    """Console script entry point."""
    app()
