from datetime import datetime
from decimal import Decimal

import pytest

from statement_import.normalizers import (
    make_transaction,
    parse_decimal,
    parse_us_date,
    to_minor_units,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("-42.50", 4250),
        ("12", 1200),
        ("19.995", 2000),
        ("19.994", 1999),
        ("0.005", 1),
        ("-0.015", 2),
        ("1.004", 100),
        ("-1234.5678", 123457),
    ],
)
def test_minor_units_round_half_up_on_absolute_value(raw, expected):
    assert to_minor_units(Decimal(raw)) == expected


def test_parse_decimal_accepts_plain_signed_literals():
    assert parse_decimal("+3") == Decimal("3")
    assert parse_decimal(".5") == Decimal("0.5")
    assert parse_decimal(" -16.33 ") == Decimal("-16.33")


@pytest.mark.parametrize("raw", ["", "abc", "$5.00", "1,000.00", "NaN", "Infinity", "1e3", "--1", "-\u0664\u0662.\u0665\u0660"])
def test_parse_decimal_rejects_non_literals(raw):
    with pytest.raises(ValueError):
        parse_decimal(raw)


def test_parse_us_date_anchors_at_midday():
    assert parse_us_date("1/5/2024") == datetime(2024, 1, 5, 12, 0, 0)
    assert parse_us_date("12/31/2023") == datetime(2023, 12, 31, 12, 0, 0)


@pytest.mark.parametrize("raw", ["02/30/2024", "13/01/2024", "2024-01-15", "01/15/24", "", "1/5/2024x", "\u0661/\u0665/\u0662\u0660\u0662\u0664"])
def test_parse_us_date_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        parse_us_date(raw)


def test_make_transaction_derives_sign_fields():
    when = datetime(2024, 1, 15, 12)
    debit = make_transaction(when, Decimal("-42.50"), "  Coffee Shop ")
    assert debit.amount == 4250
    assert debit.is_credit is False
    assert debit.selected is True
    assert debit.description == "Coffee Shop"

    credit = make_transaction(when, Decimal("10.00"), "Refund")
    assert credit.is_credit is True
    assert credit.selected is False

    zero = make_transaction(when, Decimal("0.00"), "Adjustment")
    assert zero.is_credit is False
    assert zero.selected is True
    assert zero.amount == 0


def test_identities_are_unique():
    when = datetime(2024, 1, 15, 12)
    ids = {make_transaction(when, Decimal("-1"), "x").identity for _ in range(200)}
    assert len(ids) == 200


def test_minor_units_beyond_default_decimal_precision():
    thirty_digits = Decimal("111111111111111111111111111111.00")
    assert to_minor_units(thirty_digits) == 11111111111111111111111111111100
    assert to_minor_units(-thirty_digits) == 11111111111111111111111111111100


def test_minor_units_round_long_fractions_once():
    # 0.4999... cents must not be pre-rounded up to 0.5 before the half-up step.
    assert to_minor_units(Decimal("0.00499999999999999999999999999999")) == 0
    assert to_minor_units(Decimal("0.00500000000000000000000000000000")) == 1
    assert to_minor_units(Decimal("999.995")) == 100000
