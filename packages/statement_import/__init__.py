"""Public interface for the ``statement_import`` package.

Symbol re-exports only; see :mod:`statement_import.api` for behavior.
"""

from .api import (
    available_formats,
    build_expense_batch,
    parse_csv,
    parse_csv_file,
    transaction_to_expense_values,
)
from .ingest import detect_csv_format, split_csv_line
from .models import (
    CSV_FORMAT_LABELS,
    MAX_BATCH_SIZE,
    CsvFormat,
    ExpenseBatch,
    ExpenseFormValues,
    PaidFor,
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    Transaction,
)

__all__ = [
    # API
    "parse_csv",
    "parse_csv_file",
    "detect_csv_format",
    "split_csv_line",
    "available_formats",
    "transaction_to_expense_values",
    "build_expense_batch",
    # Models / types
    "CsvFormat",
    "CSV_FORMAT_LABELS",
    "Transaction",
    "ParseSuccess",
    "ParseFailure",
    "ParseOutcome",
    "PaidFor",
    "ExpenseFormValues",
    "ExpenseBatch",
    "MAX_BATCH_SIZE",
]
