"""Data models for ``statement_import``.

Two families live here:

- Parse results: :class:`Transaction` plus the tagged outcome
  :class:`ParseSuccess` / :class:`ParseFailure` returned by
  :func:`statement_import.api.parse_csv`.
- Downstream DTOs: :class:`ExpenseFormValues` and :class:`ExpenseBatch`, the
  pydantic models describing what the expense-creation contract accepts.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any, ClassVar, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------


class CsvFormat(StrEnum):
    """Closed set of supported bank export layouts.

    Declaration order is the detection priority order.
    """

    CHASE = "chase"
    CAPITAL_ONE = "capital-one"
    BANK_OF_AMERICA = "bank-of-america"
    WELLS_FARGO = "wells-fargo"


CSV_FORMAT_LABELS: dict[CsvFormat, str] = {
    CsvFormat.WELLS_FARGO: "Wells Fargo",
    CsvFormat.CHASE: "Chase",
    CsvFormat.BANK_OF_AMERICA: "Bank of America",
    CsvFormat.CAPITAL_ONE: "Capital One",
}


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Transaction:
    """A single normalized bank transaction.

    Attributes
    ----------
    identity:
        Opaque token unique within the process; excluded from equality so two
        parses of the same text compare equal.
    date:
        Naive ``datetime`` anchored at 12:00 so later timezone arithmetic
        cannot move it across a day boundary.
    amount:
        Absolute value in minor units (cents).
    raw_amount:
        Signed decimal as derived from the export; negative is money leaving
        the account.
    is_credit:
        ``raw_amount > 0``.
    description:
        Trimmed merchant/memo text.
    selected:
        Import pre-selection, ``not is_credit`` at parse time. The only field
        that can be reassigned after construction.
    """

    identity: str = field(compare=False)
    date: datetime
    amount: int
    raw_amount: Decimal
    is_credit: bool
    description: str
    selected: bool

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "selected" and hasattr(self, name):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        object.__setattr__(self, name, value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.identity,
            "date": self.date.date().isoformat(),
            "amount": self.amount,
            "rawAmount": str(self.raw_amount),
            "isCredit": self.is_credit,
            "description": self.description,
            "selected": self.selected,
        }


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    transactions: list[Transaction]
    detected_format: CsvFormat

    success: ClassVar[bool] = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "detectedFormat": self.detected_format.value,
            "transactions": [tx.to_dict() for tx in self.transactions],
        }


@dataclass(frozen=True, slots=True)
class ParseFailure:
    error: str

    success: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.error}


ParseOutcome: TypeAlias = ParseSuccess | ParseFailure
"""Result of :func:`statement_import.api.parse_csv`; branch on ``.success``."""


# ---------------------------------------------------------------------------
# Downstream expense-creation DTOs
# ---------------------------------------------------------------------------

MAX_BATCH_SIZE = 500


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PaidFor(_CamelModel):
    participant: str
    shares: int = 1


class ExpenseFormValues(_CamelModel):
    """Values for one expense as accepted by the expense-creation form schema.

    Identifiers are carried through unchecked; the consumer validates them
    against the group.
    """

    expense_date: datetime
    title: str
    category: int = 0
    amount: int
    paid_by: str
    paid_for: list[PaidFor]
    split_mode: Literal["EVENLY"] = "EVENLY"
    is_reimbursement: bool = False
    save_default_splitting_options: bool = False
    documents: list[Any] = Field(default_factory=list)
    notes: str | None = None
    recurrence_rule: Literal["NONE"] = "NONE"
    original_amount: int | None = None
    original_currency: str = ""
    conversion_rate: float | None = None


class ExpenseBatch(_CamelModel):
    """Payload for a batch expense import (1 to ``MAX_BATCH_SIZE`` expenses)."""

    group_id: str = Field(min_length=1)
    expenses: list[ExpenseFormValues] = Field(min_length=1, max_length=MAX_BATCH_SIZE)
    participant_id: str | None = None

    @field_validator("group_id")
    @classmethod
    def _group_id_non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("group_id must be non-empty")
        return v


__all__ = [
    "CsvFormat",
    "CSV_FORMAT_LABELS",
    "Transaction",
    "ParseSuccess",
    "ParseFailure",
    "ParseOutcome",
    "MAX_BATCH_SIZE",
    "PaidFor",
    "ExpenseFormValues",
    "ExpenseBatch",
]
