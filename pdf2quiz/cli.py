"""
CLI Interface
=============
Command-line interface for the PDF to quiz JSON converter.

Usage:
    pdf2quiz convert [--pdf PATH] [--output PATH] [options]
    pdf2quiz validate <json_path>
    pdf2quiz info <pdf_path>
    pdf2quiz lines <raw_text_path>
"""

from __future__ import annotations

import json
import logging
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__, storage
from .converter import ConverterConfig, PdfToJsonConverter
from .extractor import ExtractorUnavailableError, TextExtractor
from .segmenter import is_option_line, is_question_line, segment_questions
from .validator import QuizValidator

console = Console()
logger = logging.getLogger(__name__)

MANUAL_STEPS = (
    "1. Review the raw text in {raw_text}\n"
    "2. Manually format questions into the JSON structure\n"
    "3. Save the result as {output}\n"
    "4. Check it with: pdf2quiz validate {output}"
)


@click.group()
@click.version_option(version=__version__, prog_name="pdf2quiz")
def cli():
    """pdf2quiz — Multiple-choice PDF to quiz JSON converter."""
    pass


@cli.command()
@click.option(
    "--pdf", "pdf_path",
    default=str(storage.DEFAULT_PDF_PATH),
    show_default=True,
    help="Source PDF",
)
@click.option(
    "--output", "-o",
    default=str(storage.DEFAULT_OUTPUT_PATH),
    show_default=True,
    help="Questions JSON output path",
)
@click.option(
    "--raw-text",
    default=str(storage.DEFAULT_RAW_TEXT_PATH),
    show_default=True,
    help="Where to dump the extracted text",
)
@click.option(
    "--preview-chars",
    default=500,
    type=click.IntRange(min=0),
    help="Characters of extracted text to log",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only the questions JSON to stdout",
)
def convert(
    pdf_path: str,
    output: str,
    raw_text: str,
    preview_chars: int,
    log_level: str,
    log_file: str,
    json_output: bool,
):
    """Extract questions from the PDF and write the quiz JSON."""

    try:
        extractor = TextExtractor()
    except ExtractorUnavailableError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if json_output:
        log_level = "ERROR"

    config = ConverterConfig(
        pdf_path=pdf_path,
        output_path=output,
        raw_text_path=raw_text,
        preview_chars=preview_chars,
        log_level=log_level,
        log_file=log_file,
    )

    if not json_output:
        console.print()
        console.print(
            Panel.fit(
                f"[bold cyan]pdf2quiz v{__version__}[/]\n"
                f"[dim]Converting: {os.path.basename(pdf_path)}[/]",
                border_style="cyan",
            )
        )
        console.print()

    try:
        result = PdfToJsonConverter(config, extractor=extractor).convert()
    except Exception as e:
        logger.error(f"Error converting PDF: {e}")
        if log_level == "DEBUG":
            console.print_exception()
        if not json_output:
            _display_manual_steps(config)
        return

    if json_output:
        click.echo(json.dumps(
            [q.to_json_dict() for q in result.questions],
            indent=config.indent,
            ensure_ascii=False,
        ))
        return

    _display_result(result)
    if not result.questions:
        _display_manual_steps(config)


@cli.command()
@click.argument("json_path", type=click.Path(exists=True))
def validate(json_path: str):
    """Validate a questions JSON file (e.g. after manual correction)."""

    try:
        records = storage.load_questions(json_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]Validation Report[/]\n"
            f"[dim]File: {json_path}[/]",
            border_style="cyan",
        )
    )

    report = QuizValidator().validate(records)
    _display_validation(report)

    if not report.is_clean:
        sys.exit(1)


@cli.command()
@click.argument("pdf_path", type=click.Path(exists=True, dir_okay=False))
def info(pdf_path: str):
    """Display PDF file information."""

    try:
        extractor = TextExtractor()
    except ExtractorUnavailableError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    with open(pdf_path, "rb") as f:
        data = f.read()

    try:
        page_count = extractor.page_count(data)
        metadata = extractor.metadata(data)
        text = extractor.extract(data)
    except RuntimeError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    console.print()
    table = Table(title="PDF Information", border_style="cyan")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("File", os.path.basename(pdf_path))
    table.add_row("Pages", str(page_count))
    table.add_row("File Size", f"{len(data) / 1024:.1f} KB")

    for key in ["title", "author", "subject", "creator", "producer"]:
        val = metadata.get(key, "")
        if val:
            table.add_row(key.title(), val)

    table.add_row("Text Length", str(len(text)))

    console.print(table)
    console.print()


@cli.command()
@click.argument("text_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", default=200, type=int, help="Max lines to show")
def lines(text_path: str, limit: int):
    """Show how each line of a raw-text dump is classified."""

    with open(text_path, "r", encoding="utf-8") as f:
        text = f.read()

    table = Table(title="Line Classification", border_style="cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", justify="center")
    table.add_column("Line")

    shown = 0
    for number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        if shown >= limit:
            break
        if is_question_line(line):
            kind = "[bold cyan]Q[/]"
        elif is_option_line(line):
            kind = "[green]opt[/]"
        else:
            kind = "[dim]-[/]"
        table.add_row(str(number), kind, escape(line))
        shown += 1

    console.print(table)
    found = len(segment_questions(text))
    console.print(f"[bold]Complete questions:[/] {found}")
    console.print()


# ─── Display Helpers ──────────────────────────────────────────────────────────


def _display_result(result):
    """Display conversion results in a formatted table."""
    console.print()

    table = Table(title="Conversion Summary", border_style="cyan")
    table.add_column("Property", style="bold")
    table.add_column("Value")
    table.add_row("Source PDF", result.source_pdf)
    table.add_row("Text Length", str(result.text_length))
    table.add_row("Questions Found", str(result.question_count))
    table.add_row("Raw Text", result.raw_text_path)
    table.add_row("Questions JSON", result.output_path or "[yellow](not written)[/]")
    console.print(table)
    console.print()

    if result.output_path:
        console.print("[green]✓ Conversion complete![/]")
        console.print(
            "[dim]answerIndex defaults to 0; verify answers manually.[/]"
        )
        console.print()


def _display_manual_steps(config: ConverterConfig):
    console.print(
        Panel(
            MANUAL_STEPS.format(
                raw_text=config.raw_text_path,
                output=config.output_path,
            ),
            title="[bold yellow]Manual conversion required[/]",
            border_style="yellow",
        )
    )
    console.print()


def _display_validation(report):
    """Display a validation report as a rich table."""
    table = Table(title="Validation Report", border_style="green")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_column("Status", justify="center")

    def status_icon(count, threshold=0):
        if count <= threshold:
            return "[green]✓[/]"
        return "[red]✗[/]"

    table.add_row(
        "Total Records",
        str(report.total_records),
        "[green]✓[/]" if report.total_records > 0 else "[red]✗[/]",
    )
    table.add_row(
        "Valid Records",
        f"{report.valid_records} ({report.success_rate}%)",
        status_icon(len(report.issues)),
    )
    table.add_row(
        "Duplicate Ids",
        str(len(report.duplicate_ids)),
        status_icon(len(report.duplicate_ids)),
    )
    table.add_row(
        "Missing Ids",
        str(report.missing_id_count),
        status_icon(report.missing_id_count),
    )

    console.print(table)
    console.print()

    if report.issues:
        issue_table = Table(title="Invalid Records", border_style="yellow")
        issue_table.add_column("Index", justify="right")
        issue_table.add_column("Id", justify="right")
        issue_table.add_column("Problem")

        for issue in report.issues:
            issue_table.add_row(
                str(issue.index),
                "-" if issue.record_id is None else str(issue.record_id),
                issue.message,
            )

        console.print(issue_table)
        console.print()


# ─── Entry point (for python -m pdf2quiz.cli) ────────────────────────────────


if __name__ == "__main__":
    cli()
