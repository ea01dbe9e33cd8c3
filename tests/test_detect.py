from statement_import import CsvFormat, detect_csv_format
from statement_import.ingest.detect import detect_format_from_first_line


def test_detects_each_supported_format():
    samples = {
        "Transaction Date,Post Date,Description,Category,Type,Amount,Memo": CsvFormat.CHASE,
        "Transaction Date,Posted Date,Card No.,Description,Category,Debit,Credit": (
            CsvFormat.CAPITAL_ONE
        ),
        "Date,Description,Amount,Running Bal.": CsvFormat.BANK_OF_AMERICA,
        '"01/15/2024","-42.50","*","","Coffee Shop"': CsvFormat.WELLS_FARGO,
    }
    for first_line, expected in samples.items():
        assert detect_csv_format(first_line + "\n") == expected


def test_header_match_is_case_insensitive():
    assert detect_csv_format("DATE,DESCRIPTION,AMOUNT,RUNNING BAL.") == CsvFormat.BANK_OF_AMERICA


def test_overlapping_keyword_sets_resolve_by_priority():
    chase_and_capital_one = "Transaction Date,Post Date,Posted Date,Category,Type,Debit,Credit"
    chase_and_boa = "Transaction Date,Post Date,Description,Category,Type,Amount,Running Bal."
    capital_one_and_boa = "Transaction Date,Posted Date,Description,Debit,Credit,Running Bal."
    for _ in range(3):
        assert detect_format_from_first_line(chase_and_capital_one) == CsvFormat.CHASE
        assert detect_format_from_first_line(chase_and_boa) == CsvFormat.CHASE
        assert detect_format_from_first_line(capital_one_and_boa) == CsvFormat.CAPITAL_ONE


def test_only_first_non_blank_line_is_inspected():
    text = "\n\n01/15/2024,-42.50,*,,Coffee Shop\nDate,Description,Amount,Running Bal.\n"
    assert detect_csv_format(text) == CsvFormat.WELLS_FARGO

    # Keywords appearing in a later description do not count.
    text = "01/15/2024,-1.00,X,,memo\n01/16/2024,-2.00,*,,transaction date post date category type\n"
    assert detect_csv_format(text) is None


def test_headerless_shape_requires_exact_field_count_and_sentinel():
    assert detect_csv_format("01/15/2024,-42.50,*,,Coffee Shop,extra") is None
    assert detect_csv_format("01/15/2024,-42.50,x,,Coffee Shop") is None


def test_unknown_and_empty_input():
    assert detect_csv_format("Posting Date,Amount,Memo") is None
    assert detect_csv_format("") is None
    assert detect_csv_format(" \r\n \n") is None
