"""Table-driven row parsing for the supported bank layouts.

:func:`parse_rows` walks every data row of a :class:`ColumnLayout` and either
returns all transactions or raises :class:`RowParseError` for the first bad
row. A malformed row usually means the wrong format was picked or the file is
corrupt, so no partial result is ever returned.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from ..models import Transaction
from ..normalizers import make_transaction, parse_decimal, parse_us_date
from .layouts import ColumnLayout
from .splitter import split_csv_line


class RowParseError(ValueError):
    """A row-local defect. ``row`` is 1-based over the non-blank lines."""

    def __init__(self, row: int, detail: str) -> None:
        self.row = row
        self.detail = detail
        super().__init__(f"Row {row}: {detail}")


def _check_columns(layout: ColumnLayout, fields: Sequence[str], row: int) -> None:
    found = len(fields)
    if layout.exact_columns:
        if found != layout.min_columns:
            raise RowParseError(
                row, f"Expected {layout.min_columns} columns but found {found}."
            )
    elif found < layout.min_columns:
        raise RowParseError(
            row, f"Expected at least {layout.min_columns} columns but found {found}."
        )


def _amount(raw: str, row: int) -> Decimal:
    try:
        return parse_decimal(raw)
    except ValueError:
        raise RowParseError(row, f'Invalid amount "{raw}".') from None


def _optional_amount(raw: str, row: int) -> Decimal | None:
    if not raw.strip():
        return None
    return _amount(raw, row)


def _signed_amount(layout: ColumnLayout, fields: Sequence[str], row: int) -> Decimal:
    if layout.amount_col is not None:
        return _amount(fields[layout.amount_col], row)

    debit = _optional_amount(fields[layout.debit_col], row)
    credit = _optional_amount(fields[layout.credit_col], row)
    # Debit wins when both are filled in.
    if debit is not None:
        return -abs(debit)
    if credit is not None:
        return abs(credit)
    raise RowParseError(row, "No debit or credit amount found.")


def parse_row(layout: ColumnLayout, line: str, row: int) -> Transaction:
    fields = split_csv_line(line)
    _check_columns(layout, fields, row)

    raw_date = fields[layout.date_col]
    try:
        date = parse_us_date(raw_date)
    except ValueError:
        raise RowParseError(row, f'Invalid date "{raw_date}".') from None

    raw_amount = _signed_amount(layout, fields, row)
    return make_transaction(date, raw_amount, fields[layout.description_col])


def parse_rows(layout: ColumnLayout, lines: Sequence[str]) -> list[Transaction]:
    """Parse ``lines[layout.first_data_row:]`` in order.

    ``lines`` are the non-blank lines of the export, header included.
    """

    return [
        parse_row(layout, lines[i], row=i + 1)
        for i in range(layout.first_data_row, len(lines))
    ]


__all__ = ["RowParseError", "parse_row", "parse_rows"]
