"""Line splitting, format detection, and row parsing for bank CSV exports."""

from .detect import detect_csv_format
from .layouts import LAYOUTS, ColumnLayout
from .rows import RowParseError, parse_rows
from .splitter import non_blank_lines, split_csv_line

__all__ = [
    "ColumnLayout",
    "LAYOUTS",
    "RowParseError",
    "detect_csv_format",
    "non_blank_lines",
    "parse_rows",
    "split_csv_line",
]
