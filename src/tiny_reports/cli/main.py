import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import TypeAdapter, ValidationError

from tiny_reports.core import logging_config  # noqa: F401  configures the "tiny_reports" logger
from tiny_reports.core.errors import ReportError
from tiny_reports.features.reports.schemas import Item, User
from tiny_reports.features.reports.service import ReportGenerator

logger = logging.getLogger(__name__)

app = typer.Typer(name="tiny-reports", help="CLI for rendering role-filtered item reports.")

_items_adapter = TypeAdapter(list[Item])


@app.callback()
def main():
    """Render CSV and HTML item reports from the command line."""


def _load_items(source: str) -> list[Item]:
    """Reads a JSON array of items from a file path, or from stdin when source is '-'."""
    raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    return _items_adapter.validate_python(json.loads(raw))


@app.command("render")
def render_report_command(
    items_file: str = typer.Argument(..., help="JSON file with a list of {id, name, value} items, or '-' for stdin."),
    report_type: str = typer.Option("CSV", "--type", "-t", help="Report type: CSV or HTML."),
    user_name: Optional[str] = typer.Option(None, "--user-name", "-u", help="Name of the viewer shown in the report."),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="Role of the viewer, e.g. ADMIN or USER."),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Fail on unknown roles and report types."),
    escape: Optional[bool] = typer.Option(None, "--escape/--no-escape", help="Escape fields before embedding them."),
):
    """Renders a report for the given viewer and prints it."""
    try:
        items = _load_items(items_file)
    except FileNotFoundError:
        typer.secho(f"Error: Items file '{items_file}' not found.", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    except (json.JSONDecodeError, ValidationError) as e:
        typer.secho(f"Error: Could not read items from '{items_file}'. Details: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    generator = ReportGenerator(strict=strict, escape=escape)
    try:
        outcome = generator.build_report(report_type, User(name=user_name, role=role), items)
    except ReportError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if outcome.is_empty:
        typer.secho("Report is empty.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=0)
    typer.echo(outcome.content)


if __name__ == "__main__":
    app()
