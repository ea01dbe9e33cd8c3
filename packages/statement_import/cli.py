"""CLI for the ``statement_import`` package.

A Typer console interface over :mod:`statement_import.api`. Environment
variables are loaded from a local ``.env`` via ``python-dotenv`` in the root
callback, which also configures logging. ``STATEMENT_IMPORT_FORMAT`` provides
a default for ``--format``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from typer.models import OptionInfo

from .api import available_formats, build_expense_batch, parse_csv_file
from .logging_setup import configure_logging
from .models import CSV_FORMAT_LABELS, ParseOutcome, ParseSuccess

FORMAT_ENV = "STATEMENT_IMPORT_FORMAT"

app = typer.Typer(
    name="statement-import",
    no_args_is_help=True,
    add_completion=False,
    help="Parse bank CSV exports (Chase, Capital One, Bank of America, Wells Fargo).",
)
console = Console()


# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,
    "--csv-path",
    help="Path to a bank CSV export",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
FORMAT_OPTION: OptionInfo = typer.Option(
    "--format",
    envvar=FORMAT_ENV,
    help="Bank format id (skip auto-detection). See the 'formats' command.",
)


def _load(csv_path: Path, csv_format: str | None) -> ParseSuccess:
    try:
        outcome: ParseOutcome = parse_csv_file(csv_path, csv_format)
    except FileNotFoundError:
        typer.echo(f"Error: File not found: {csv_path}", err=True)
        raise typer.Exit(1) from None
    except PermissionError:
        typer.echo(f"Error: Permission denied: {csv_path}", err=True)
        raise typer.Exit(1) from None
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: Unexpected failure reading '{csv_path}': {e}", err=True)
        raise typer.Exit(1) from None

    if not isinstance(outcome, ParseSuccess):
        typer.echo(f"Error: {outcome.error}", err=True)
        raise typer.Exit(1)
    return outcome


def _format_minor(amount: int) -> str:
    return f"{amount // 100}.{amount % 100:02d}"


@app.command("formats")
def formats_cmd() -> None:
    """List the supported bank formats in detection priority order."""

    for fmt, label in available_formats():
        typer.echo(f"{fmt.value}\t{label}")


@app.command("preview")
def preview_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    csv_format: Annotated[str | None, FORMAT_OPTION] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table.")] = False,
) -> None:
    """Parse an export and show what would be imported."""

    outcome = _load(csv_path, csv_format)

    if as_json:
        typer.echo(json.dumps(outcome.to_dict(), indent=2))
        return

    label = CSV_FORMAT_LABELS[outcome.detected_format]
    table = Table(title=f"{label}: {len(outcome.transactions)} transactions")
    table.add_column("Date")
    table.add_column("Description")
    table.add_column("Amount", justify="right")
    table.add_column("Type")
    table.add_column("Selected")
    for tx in outcome.transactions:
        table.add_row(
            tx.date.date().isoformat(),
            tx.description,
            _format_minor(tx.amount),
            "credit" if tx.is_credit else "debit",
            "yes" if tx.selected else "no",
        )
    console.print(table)


@app.command("expenses")
def expenses_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    group_id: Annotated[str, typer.Option("--group-id", help="Target group id.")],
    paid_by: Annotated[str, typer.Option("--paid-by", help="Participant id of the payer.")],
    participants: Annotated[
        list[str],
        typer.Option("--participant", help="Participant id to split with (repeatable)."),
    ],
    csv_format: Annotated[str | None, FORMAT_OPTION] = None,
) -> None:
    """Print the batch expense payload for the pre-selected (debit) rows."""

    outcome = _load(csv_path, csv_format)
    try:
        batch = build_expense_batch(
            group_id,
            outcome.transactions,
            paid_by=paid_by,
            participant_ids=participants,
        )
    except ValidationError as e:
        typer.echo(f"Error: invalid expense batch: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(batch.model_dump_json(by_alias=True, indent=2))


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


if __name__ == "__main__":  # pragma: no cover
    app()
