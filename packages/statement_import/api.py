"""Public entry points for importing bank CSV exports.

:func:`parse_csv` is the dispatcher: it detects (or accepts) the format, runs
the matching row parser, and turns every defect into a :class:`ParseFailure`.
It never raises for bad input.

:func:`transaction_to_expense_values` and :func:`build_expense_batch` map
parsed transactions onto the downstream expense-creation shapes without
validating the identifiers they are given.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import Path

from .ingest.detect import detect_csv_format
from .ingest.layouts import LAYOUTS
from .ingest.rows import RowParseError, parse_rows
from .ingest.splitter import non_blank_lines
from .logging_setup import get_logger
from .models import (
    CSV_FORMAT_LABELS,
    CsvFormat,
    ExpenseBatch,
    ExpenseFormValues,
    PaidFor,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    Transaction,
)

logger = get_logger(__name__)

EMPTY_FILE_ERROR = "The file is empty."
UNDETECTED_FORMAT_ERROR = (
    "Could not detect the CSV format. Please select your bank format manually."
)
NO_TRANSACTIONS_ERROR = "No valid transactions found in the file."


def available_formats() -> list[tuple[CsvFormat, str]]:
    """``(format, label)`` pairs in detection priority order."""

    return [(fmt, CSV_FORMAT_LABELS[fmt]) for fmt in CsvFormat]


def resolve_format(value: CsvFormat | str) -> CsvFormat:
    """Coerce an override to :class:`CsvFormat`; ``ValueError`` if unknown."""

    if isinstance(value, CsvFormat):
        return value
    key = value.strip().lower()
    try:
        return CsvFormat(key)
    except ValueError:
        raise ValueError(f"Unknown CSV format: {value!r}.") from None


def parse_csv(text: str, format: CsvFormat | str | None = None) -> ParseOutcome:
    """Parse a bank CSV export into transactions.

    Parameters
    ----------
    text:
        Raw export text; CR, LF, and CRLF line endings are all accepted.
    format:
        Explicit format override. When given, detection is skipped entirely.

    Returns
    -------
    ParseOutcome
        :class:`ParseSuccess` with the transactions in source order, or
        :class:`ParseFailure` with a single diagnostic.
    """

    lines = non_blank_lines(text)
    if not lines:
        return _fail(EMPTY_FILE_ERROR)

    if format is not None:
        try:
            csv_format = resolve_format(format)
        except ValueError as e:
            return _fail(str(e))
    else:
        csv_format = detect_csv_format(text)
        if csv_format is None:
            return _fail(UNDETECTED_FORMAT_ERROR)

    try:
        transactions = parse_rows(LAYOUTS[csv_format], lines)
    except RowParseError as e:
        return _fail(str(e))

    if not transactions:
        return _fail(NO_TRANSACTIONS_ERROR)

    logger.info("parsed %d %s transactions", len(transactions), csv_format.value)
    return ParseSuccess(transactions=transactions, detected_format=csv_format)


def parse_csv_file(
    path: str | PathLike[str],
    format: CsvFormat | str | None = None,
    *,
    encoding: str = "utf-8-sig",
) -> ParseOutcome:
    """Read ``path`` and delegate to :func:`parse_csv`.

    Filesystem errors (``FileNotFoundError``, ``PermissionError``,
    ``UnicodeDecodeError``) propagate to the caller.
    """

    text = Path(path).read_text(encoding=encoding)
    return parse_csv(text, format)


def _fail(error: str) -> ParseFailure:
    logger.info("csv import failed: %s", error)
    return ParseFailure(error=error)


def transaction_to_expense_values(
    tx: Transaction,
    paid_by: str,
    participant_ids: Sequence[str],
) -> ExpenseFormValues:
    """Map a parsed transaction to expense-form values split evenly."""

    return ExpenseFormValues(
        expense_date=tx.date,
        title=tx.description,
        amount=tx.amount,
        paid_by=paid_by,
        paid_for=[PaidFor(participant=pid, shares=1) for pid in participant_ids],
    )


def build_expense_batch(
    group_id: str,
    transactions: Iterable[Transaction],
    *,
    paid_by: str,
    participant_ids: Sequence[str],
    participant_id: str | None = None,
) -> ExpenseBatch:
    """Build a batch payload from the currently selected transactions.

    Raises ``pydantic.ValidationError`` when nothing is selected or the
    selection exceeds :data:`~statement_import.models.MAX_BATCH_SIZE`.
    """

    expenses = [
        transaction_to_expense_values(tx, paid_by, participant_ids)
        for tx in transactions
        if tx.selected
    ]
    return ExpenseBatch(group_id=group_id, expenses=expenses, participant_id=participant_id)


__all__ = [
    "EMPTY_FILE_ERROR",
    "UNDETECTED_FORMAT_ERROR",
    "NO_TRANSACTIONS_ERROR",
    "available_formats",
    "resolve_format",
    "parse_csv",
    "parse_csv_file",
    "transaction_to_expense_values",
    "build_expense_batch",
]
