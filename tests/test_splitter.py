import pytest

from statement_import.ingest.splitter import non_blank_lines, split_csv_line


def test_plain_fields_are_split_and_trimmed():
    assert split_csv_line("a,b,c") == ["a", "b", "c"]
    assert split_csv_line("  a , b  ") == ["a", "b"]


def test_delimiter_inside_quotes_is_content():
    assert split_csv_line('"value with, comma","other"') == ["value with, comma", "other"]


def test_doubled_quote_collapses_to_literal_quote():
    assert split_csv_line('"He said ""hi""",x') == ['He said "hi"', "x"]
    assert split_csv_line('""""') == ['"']


def test_empty_line_yields_single_empty_field():
    assert split_csv_line("") == [""]


def test_empty_quoted_and_trailing_fields():
    assert split_csv_line('"",a,') == ["", "a", ""]


def test_unterminated_quote_consumes_rest_of_line():
    assert split_csv_line('a,"b,c') == ["a", "b,c"]


def test_custom_delimiter():
    assert split_csv_line('a;"b;c";d') == ["a", "b;c", "d"]


def test_rejects_quote_or_multi_char_delimiter():
    with pytest.raises(ValueError):
        split_csv_line("a,b", delimiter='"')
    with pytest.raises(ValueError):
        split_csv_line("a,b", delimiter=",,")


def test_non_blank_lines_handles_every_line_ending():
    text = "a\r\nb\rc\n\n   \nd\n"
    assert non_blank_lines(text) == ["a", "b", "c", "d"]
