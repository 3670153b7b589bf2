import math

from booking_gateway.coerce import coerce_amount, full_name, js_number_text, parse_number, string_or_none


def test_string_or_none_basics():
    assert string_or_none(None) is None
    assert string_or_none("") is None
    assert string_or_none("   ") is None
    assert string_or_none("  hello  ") == "hello"


def test_string_or_none_scalars():
    assert string_or_none(123) == "123"
    assert string_or_none(0) == "0"
    assert string_or_none(-42) == "-42"
    assert string_or_none(50.0) == "50"
    assert string_or_none(75.5) == "75.5"
    assert string_or_none(True) == "true"
    assert string_or_none(False) == "false"


def test_string_or_none_containers_render_as_json():
    assert string_or_none({"key": "value"}) == '{"key":"value"}'


def test_full_name():
    assert full_name("John", "Doe") == "John Doe"
    assert full_name("John", None) == "John"
    assert full_name(None, "Doe") == "Doe"
    assert full_name("  John  ", "  Doe  ") == "John Doe"
    assert full_name(123, 456) == "123 456"


def test_full_name_empty_variants():
    assert full_name(None, None) is None
    assert full_name("", "") is None
    assert full_name("   ", "   ") is None
    assert full_name(None, "") is None
    assert full_name("", None) is None


def test_amount_numbers_pass_through():
    assert coerce_amount(50) == 50
    assert isinstance(coerce_amount(50), int)
    assert coerce_amount(0) == 0
    assert coerce_amount(12.25) == 12.25


def test_amount_strings():
    assert coerce_amount("75.50") == 75.5
    assert coerce_amount(" 10 ") == 10.0
    assert coerce_amount("invalid") is None
    assert coerce_amount("") is None
    assert coerce_amount("   ") is None


def test_amount_missing_and_other_types():
    assert coerce_amount(None) is None
    assert coerce_amount(True) is None
    assert coerce_amount(False) is None
    assert coerce_amount({"value": 1}) is None
    assert coerce_amount([1]) is None


def test_amount_non_finite():
    assert coerce_amount("inf") is None
    assert coerce_amount("-Infinity") is None
    assert coerce_amount("nan") is None
    assert coerce_amount(math.inf) is None
    assert coerce_amount(float("nan")) is None


def test_amount_follows_js_number_parsing():
    assert coerce_amount("1_000") is None
    assert coerce_amount("0x10") == 16
    assert coerce_amount("0X1f") == 31
    assert coerce_amount("0b101") == 5
    assert coerce_amount("0o17") == 15
    assert coerce_amount("-0x10") is None
    assert coerce_amount("1e3") == 1000.0
    assert coerce_amount(".5") == 0.5
    assert coerce_amount("5.") == 5.0
    assert coerce_amount("+7") == 7.0
    assert coerce_amount("١٢") is None
    assert coerce_amount("12abc") is None
    assert coerce_amount("Infinity") is None


def test_parse_number():
    assert parse_number(" 42 ") == 42.0
    assert parse_number(".") is None
    assert parse_number("1__0") is None
    assert parse_number("-Infinity") == float("-inf")


def test_float_text_matches_js():
    assert js_number_text(1e21) == "1e+21"
    assert js_number_text(1e20) == "100000000000000000000"
    assert js_number_text(1.5e-7) == "1.5e-7"
    assert js_number_text(0.000001) == "0.000001"
    assert js_number_text(-2.5) == "-2.5"
    assert js_number_text(-0.0) == "0"
    assert js_number_text(123.456) == "123.456"
    assert string_or_none(1e21) == "1e+21"
    assert string_or_none(1.5e-7) == "1.5e-7"
