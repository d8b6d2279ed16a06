"""
Typer-based CLI for topicsummary.

Reads a topic model snapshot (JSON, see topicsummary.core.adapters) and
writes one of the registered reports to a file or stdout.

Usage Patterns:
1. topicsummary summary model.json -n 10 -o summary.txt
2. topicsummary report topic-keys model.json
3. topicsummary render model.json
4. topicsummary reports
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from topicsummary.cli.exit_codes import CliExit
from topicsummary.core.adapters import load_snapshot
from topicsummary.core.errors import ModelSnapshotError, TopicSummaryError
from topicsummary.core.reports import TopicReport, available_reports, get_report
from topicsummary.core.utils.config import get_config, load_config
from topicsummary.core.utils.logger import (
    log_configuration_change,
    log_error,
    setup_logging,
)

app = typer.Typer(
    name="topicsummary",
    help="Topic model reporting toolkit",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

STDOUT = "-"


@app.callback()
def main(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
):
    """Render topic model reports."""
    try:
        config = load_config(str(config_file)) if config_file else get_config()
    except ValueError as e:
        raise CliExit.config_error(str(e))

    previous_level = config.logging.level
    if log_level:
        config.logging.level = log_level
    try:
        setup_logging(config.logging.level, config.logging.file)
    except AttributeError:
        raise CliExit.config_error(f"Invalid log level: {config.logging.level}")
    if log_level and log_level != previous_level:
        log_configuration_change("logging.level", previous_level, log_level)


def _run_report(
    report: TopicReport,
    model_file: Path,
    output: str,
    num_words: Optional[int],
) -> None:
    try:
        model = load_snapshot(model_file)
    except ModelSnapshotError as e:
        log_error("CLI", f"Cannot load model snapshot: {e}", context=str(model_file))
        raise CliExit.config_error(f"Invalid model snapshot {model_file}: {e}")

    sink = sys.stdout if output == STDOUT else Path(output)
    try:
        report.write(model, sink, num_words)
    except (TopicSummaryError, ValueError) as e:
        raise CliExit.error(str(e))
    except KeyboardInterrupt:
        raise CliExit.user_cancel()


@app.command()
def summary(
    model_file: Path = typer.Argument(..., help="Topic model snapshot (JSON)"),
    output: str = typer.Option(
        STDOUT, "--output", "-o", help="Output file, or - for stdout"
    ),
    num_words: Optional[int] = typer.Option(
        None, "--num-words", "-n", min=0, help="Top words per topic"
    ),
    escape_tokens: Optional[bool] = typer.Option(
        None,
        "--escape-tokens/--raw-tokens",
        help="Escape word tokens so the output parses as JSON",
    ),
):
    """Write smoothing and top words of every topic on one line."""
    _run_report(
        get_report("summary", escape_tokens=escape_tokens),
        model_file,
        output,
        num_words,
    )


@app.command()
def report(
    kind: str = typer.Argument(..., help="Report kind (see 'reports')"),
    model_file: Path = typer.Argument(..., help="Topic model snapshot (JSON)"),
    output: str = typer.Option(
        STDOUT, "--output", "-o", help="Output file, or - for stdout"
    ),
    num_words: Optional[int] = typer.Option(
        None, "--num-words", "-n", min=0, help="Top words per topic"
    ),
    new_lines: bool = typer.Option(
        False, "--new-lines", help="topic-keys: one word per line"
    ),
):
    """Write any registered report kind."""
    options = {"new_lines": new_lines} if kind.strip().lower() == "topic-keys" else {}
    try:
        selected = get_report(kind, **options)
    except TopicSummaryError as e:
        raise CliExit.error(str(e))
    _run_report(selected, model_file, output, num_words)


@app.command()
def render(
    model_file: Path = typer.Argument(..., help="Topic model snapshot (JSON)"),
    output: str = typer.Option(
        STDOUT, "--output", "-o", help="Output file, or - for stdout"
    ),
    num_words: Optional[int] = typer.Option(
        None, "--num-words", "-n", min=0, help="Top words per topic"
    ),
):
    """Write the configured default report kind."""
    kind = get_config().report.default_report
    try:
        selected = get_report(kind)
    except TopicSummaryError as e:
        raise CliExit.config_error(str(e))
    _run_report(selected, model_file, output, num_words)


@app.command("reports")
def list_reports():
    """List report kinds and whether they are implemented."""
    table = Table(title="Reports")
    table.add_column("Name", style="cyan")
    table.add_column("Implemented")
    table.add_column("Description")
    for entry in available_reports():
        table.add_row(
            entry["name"],
            "yes" if entry["implemented"] else "no",
            entry["description"],
        )
    console.print(table)
