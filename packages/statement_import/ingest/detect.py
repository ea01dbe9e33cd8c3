"""Format detection from the first non-blank line of an export.

Only line 1 is inspected. Description columns in later rows are free text and
could contain another format's header keywords.

Rules are evaluated top to bottom and the first match wins:

1. Header keyword sets (case-insensitive substring match on the whole line).
2. The headerless Wells Fargo shape: exactly five fields with ``*`` in the
   third.
"""

from __future__ import annotations

from collections.abc import Callable

from ..logging_setup import get_logger
from ..models import CsvFormat
from .splitter import non_blank_lines, split_csv_line

logger = get_logger(__name__)

HEADER_KEYWORDS: tuple[tuple[CsvFormat, frozenset[str]], ...] = (
    (CsvFormat.CHASE, frozenset({"transaction date", "post date", "category", "type"})),
    (CsvFormat.CAPITAL_ONE, frozenset({"transaction date", "posted date", "debit", "credit"})),
    (CsvFormat.BANK_OF_AMERICA, frozenset({"date", "description", "running bal"})),
)

WELLS_FARGO_FIELD_COUNT = 5
WELLS_FARGO_SENTINEL_COL = 2
WELLS_FARGO_SENTINEL = "*"


def _has_keywords(keywords: frozenset[str]) -> Callable[[str], bool]:
    def predicate(first_line: str) -> bool:
        lowered = first_line.lower()
        return all(k in lowered for k in keywords)

    return predicate


def _is_wells_fargo_row(first_line: str) -> bool:
    fields = split_csv_line(first_line)
    return (
        len(fields) == WELLS_FARGO_FIELD_COUNT
        and fields[WELLS_FARGO_SENTINEL_COL] == WELLS_FARGO_SENTINEL
    )


_RULES: tuple[tuple[Callable[[str], bool], CsvFormat], ...] = (
    *((_has_keywords(keywords), fmt) for fmt, keywords in HEADER_KEYWORDS),
    (_is_wells_fargo_row, CsvFormat.WELLS_FARGO),
)


def detect_format_from_first_line(first_line: str) -> CsvFormat | None:
    for predicate, fmt in _RULES:
        if predicate(first_line):
            return fmt
    return None


def detect_csv_format(text: str) -> CsvFormat | None:
    """Classify raw export text, or return ``None`` when no rule matches."""

    lines = non_blank_lines(text)
    if not lines:
        return None
    fmt = detect_format_from_first_line(lines[0])
    logger.debug("detected csv format: %s", fmt)
    return fmt


__all__ = ["HEADER_KEYWORDS", "detect_csv_format", "detect_format_from_first_line"]
