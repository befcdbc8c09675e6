from product_csv.records import (
    Record,
    key_of,
    loose_equals,
    parse_line,
    render_record,
    strict_equals,
)


def test_parse_line_keeps_raw_text():
    assert parse_line("1,Product 1,100") == Record("1", "Product 1", "100")


def test_parse_line_pads_and_truncates():
    assert parse_line("7") == Record("7", "", "")
    assert parse_line("7,Shoe,Red,15") == Record("7", "Shoe", "Red")


def test_key_of():
    assert key_of("abc,x,1") == "abc"
    assert key_of("") == ""


def test_render_record_formats_numbers():
    assert render_record("1", "Product 1", 100) == "1,Product 1,100"
    assert render_record("1", "Product 1", 100.0) == "1,Product 1,100"
    assert render_record(2, "Lamp", 9.5) == "2,Lamp,9.5"


def test_loose_equals_coerces_numeric_keys():
    assert loose_equals("1", "1")
    assert loose_equals("1", 1)
    assert loose_equals(" 1 ", 1)
    assert loose_equals("1.0", 1)
    assert loose_equals("", 0)
    assert not loose_equals("01", "1")
    assert not loose_equals("abc", 0)
    assert not loose_equals("nan", float("nan"))
    assert not loose_equals("1_0", 10)
    assert loose_equals("0x10", 16)
    assert loose_equals("0B11", 3)
    assert loose_equals("0o17", 15)
    assert not loose_equals("-0x10", -16)
    assert not loose_equals("0x", 0)
    assert loose_equals("1e999", float("inf"))
    assert loose_equals("-Infinity", float("-inf"))
    assert not loose_equals("inf", float("inf"))


def test_strict_equals_never_coerces():
    assert strict_equals("1", "1")
    assert not strict_equals("1", 1)
    assert not strict_equals("01", "1")
