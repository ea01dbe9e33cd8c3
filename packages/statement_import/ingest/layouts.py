"""Column maps for the supported bank exports.

Each layout records where the date, amount, and description live and how
many columns a data row must carry. Split-column layouts name a debit and a
credit column instead of a single signed amount column.

Sample headers as exported:

- Chase: ``Transaction Date,Post Date,Description,Category,Type,Amount,Memo``
- Capital One: ``Transaction Date,Posted Date,Card No.,Description,Category,Debit,Credit``
- Bank of America: ``Date,Description,Amount,Running Bal.``
- Wells Fargo: no header; ``"01/15/2024","-42.50","*","","COFFEE SHOP"``
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models import CsvFormat


@dataclass(frozen=True, slots=True)
class ColumnLayout:
    csv_format: CsvFormat
    min_columns: int
    date_col: int
    description_col: int
    amount_col: int | None = None
    debit_col: int | None = None
    credit_col: int | None = None
    has_header: bool = True
    # Rows must have exactly ``min_columns`` fields.
    exact_columns: bool = False

    def __post_init__(self) -> None:
        single = self.amount_col is not None
        split = self.debit_col is not None and self.credit_col is not None
        if single == split:
            raise ValueError(
                f"{self.csv_format}: layout needs either amount_col or debit_col+credit_col"
            )

    @property
    def first_data_row(self) -> int:
        return 1 if self.has_header else 0

    @property
    def is_split(self) -> bool:
        return self.amount_col is None


LAYOUTS: dict[CsvFormat, ColumnLayout] = {
    CsvFormat.WELLS_FARGO: ColumnLayout(
        CsvFormat.WELLS_FARGO,
        min_columns=5,
        date_col=0,
        amount_col=1,
        description_col=4,
        has_header=False,
        exact_columns=True,
    ),
    CsvFormat.CHASE: ColumnLayout(
        CsvFormat.CHASE,
        min_columns=6,
        date_col=0,
        amount_col=5,
        description_col=2,
    ),
    CsvFormat.BANK_OF_AMERICA: ColumnLayout(
        CsvFormat.BANK_OF_AMERICA,
        min_columns=3,
        date_col=0,
        amount_col=2,
        description_col=1,
    ),
    CsvFormat.CAPITAL_ONE: ColumnLayout(
        CsvFormat.CAPITAL_ONE,
        min_columns=7,
        date_col=0,
        debit_col=5,
        credit_col=6,
        description_col=3,
    ),
}


__all__ = ["ColumnLayout", "LAYOUTS"]
