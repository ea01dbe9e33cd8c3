"""Shared normalization helpers: amounts, dates, and transaction assembly.

Amounts are handled as :class:`decimal.Decimal` end to end. Conversion to
minor units rounds half up (away from zero on the absolute value), so
``19.995`` becomes ``2000`` and ``0.004`` becomes ``0``.
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from .models import Transaction

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$", re.ASCII)
# M/D/YYYY with one or two digit month and day.
_US_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$", re.ASCII)

MIDDAY_HOUR = 12


def parse_decimal(raw: str) -> Decimal:
    """Parse a plain signed decimal literal such as ``-42.50`` or ``+3``.

    Raises ``ValueError`` for anything else (currency symbols, separators,
    exponents, ``NaN``).
    """

    s = raw.strip()
    if not _DECIMAL_RE.match(s):
        raise ValueError(f"invalid amount: {raw!r}")
    try:
        return Decimal(s)
    except InvalidOperation as exc:  # pragma: no cover - regex already guards
        raise ValueError(f"invalid amount: {raw!r}") from exc


def to_minor_units(amount: Decimal) -> int:
    """Round ``abs(amount) * 100`` half up to an integer, exactly.

    Precision is sized to the literal so long amounts neither overflow the
    default 28-digit context nor get rounded twice.
    """

    with localcontext() as ctx:
        ctx.prec = len(amount.as_tuple().digits) + 3
        scaled = abs(amount).scaleb(2)
        return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_us_date(raw: str) -> datetime:
    """Parse ``M/D/YYYY`` into a naive ``datetime`` at midday.

    Impossible calendar dates (``02/30/2024``) raise ``ValueError``.
    """

    match = _US_DATE_RE.match(raw.strip())
    if not match:
        raise ValueError(f"invalid M/D/YYYY date: {raw!r}")
    month, day, year = (int(g) for g in match.groups())
    try:
        return datetime(year, month, day, MIDDAY_HOUR, 0, 0)
    except ValueError as exc:
        raise ValueError(f"invalid M/D/YYYY date: {raw!r}") from exc


def new_identity() -> str:
    return uuid.uuid4().hex


def make_transaction(date: datetime, raw_amount: Decimal, description: str) -> Transaction:
    """Assemble a :class:`Transaction`, deriving the sign-based fields."""

    is_credit = raw_amount > 0
    return Transaction(
        identity=new_identity(),
        date=date,
        amount=to_minor_units(raw_amount),
        raw_amount=raw_amount,
        is_credit=is_credit,
        description=description.strip(),
        selected=not is_credit,
    )


__all__ = [
    "parse_decimal",
    "to_minor_units",
    "parse_us_date",
    "new_identity",
    "make_transaction",
]
