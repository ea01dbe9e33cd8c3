"""Quote-aware splitting of a single delimited record.

Unlike :mod:`csv`, this works strictly on one line at a time and is
permissive: an unterminated quote swallows the rest of the line instead of
raising. A doubled quote inside a quoted span is a literal quote character.
Every field is stripped of surrounding whitespace.
"""

from __future__ import annotations

import re

QUOTE = '"'
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def non_blank_lines(text: str) -> list[str]:
    """Split ``text`` on CR, LF, or CRLF and drop whitespace-only lines."""

    return [line for line in _LINE_BREAK_RE.split(text) if line.strip()]


def split_csv_line(line: str, delimiter: str = ",") -> list[str]:
    """Split ``line`` into trimmed fields.

    An empty line yields ``[""]``, never an empty list.
    """

    if len(delimiter) != 1 or delimiter == QUOTE:
        raise ValueError(f"delimiter must be a single non-quote character: {delimiter!r}")

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current).strip())
    return fields


__all__ = ["non_blank_lines", "split_csv_line"]
