"""Pruebas de la conversión entre números y texto."""

import math

import pytest

from calculadora.core.formatting import (
    format_result,
    group_thousands,
    number_to_text,
    parse_number,
)


@pytest.mark.parametrize("text, expected", [
    ("12", 12.0),
    ("5.", 5.0),
    ("0.25", 0.25),
    ("1.5e9", 1.5e9),
    ("2e-7", 2e-7),
    ("12abc", 12.0),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_parse_number_keeps_negative_zero():
    value = parse_number("-0.")
    assert value == 0
    assert math.copysign(1.0, value) < 0


@pytest.mark.parametrize("text", ["", None, "-", "Error", "Infinity", "abc", "."])
def test_parse_number_rejects_non_numbers(text):
    assert parse_number(text) is None


@pytest.mark.parametrize("text, expected", [
    ("0", "0"),
    ("999", "999"),
    ("1234567", "1,234,567"),
    ("123456789", "123,456,789"),
    ("1234.50", "1,234.50"),
    ("12.", "12."),
    ("-1234", "-1,234"),
    ("-0.", "-0."),
    ("0.00001", "0.00001"),
    ("2e9", "2,000,000,000"),
    ("1.5e9", "1.5e9"),
])
def test_group_thousands(text, expected):
    assert group_thousands(text) == expected


@pytest.mark.parametrize("text", ["", None, "Error", "Infinity"])
def test_group_thousands_empty_for_non_numbers(text):
    assert group_thousands(text) == ""


@pytest.mark.parametrize("value, expected", [
    (2.5, "2.5"),
    (2.100000000, "2.1"),
    (20.0, "20"),
    (500.0, "500"),
    (-2.0, "-2"),
    (0.0, "0"),
    (-0.0, "0"),
    (0.000001, "0.000001"),
    (999999999.0, "999999999"),
    (1 / 3, "0.33333333"),
    (2 / 3, "0.66666667"),
    (0.1 + 0.2, "0.3"),
])
def test_format_result_decimal(value, expected):
    assert format_result(value) == expected


@pytest.mark.parametrize("value, expected", [
    (1500000000.0, "1.5e9"),
    (1e9, "1e9"),
    (-2.5e10, "-2.5e10"),
    (1e-7, "1e-7"),
    (1.23e-7, "1.23e-7"),
    (1000000500.0, "1.000001e9"),
    (9999999999.0, "1e10"),
])
def test_format_result_exponential(value, expected):
    assert format_result(value) == expected


def test_format_result_exponential_keeps_negative_exponent_sign():
    text = format_result(4.5e-8)
    assert text == "4.5e-8"
    assert "+" not in format_result(4.5e12)


def test_format_result_special_values():
    assert format_result(float("nan")) == "Error"
    assert format_result(float("inf")) == "Infinity"
    assert format_result(float("-inf")) == "Infinity"


@pytest.mark.parametrize("value, expected", [
    (0.0, "0"),
    (20.0, "20"),
    (123.0, "123"),
    (0.5, "0.5"),
    (-0.05, "-0.05"),
    (0.1 + 0.2, "0.30000000000000004"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (2.5e-8, "2.5e-8"),
    (1e20, "100000000000000000000"),
    (1e21, "1e+21"),
    (1.5e21, "1.5e+21"),
    (float("inf"), "Infinity"),
])
def test_number_to_text(value, expected):
    assert number_to_text(value) == expected
