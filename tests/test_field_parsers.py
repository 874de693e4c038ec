"""Tests for the live-typing quantity and price fields."""

from __future__ import annotations

import pytest

from services.errors import InvalidInputError
from services.field_parsers import (
    Commit,
    PriceField,
    QuantityField,
    apply_text,
    format_price,
    parse_price_input,
    parse_quantity_input,
)


def test_quantity_commits_whole_numbers():
    field = QuantityField(2)

    assert field.on_input("5") == Commit(5)
    assert field.committed == 5
    assert field.on_blur() is None


@pytest.mark.parametrize("text", ["", "0", "abc", "1.5", "-2"])
def test_quantity_holds_invalid_text_then_resets_on_blur(text):
    field = QuantityField(3)

    assert field.on_input(text) is None
    assert field.committed == 3
    assert field.on_blur() == Commit(1)
    assert field.text == "1"
    assert field.committed == 1


def test_price_trailing_separator_waits_for_blur():
    field = PriceField(None)

    assert field.on_input("12.") is None
    assert field.committed is None

    assert field.on_blur() == Commit(12.0)
    assert field.text == "12"
    assert field.committed == 12.0


def test_price_accepts_comma_separator():
    field = PriceField(None)

    assert field.on_input("3,5") == Commit(3.5)
    assert field.on_blur() is None


def test_price_clearing_field_clears_price():
    field = PriceField(4.0)

    assert field.on_input("") == Commit(None)
    assert field.committed is None
    assert field.on_blur() is None


def test_price_ignores_disallowed_characters():
    field = PriceField(2.0)

    assert field.on_input("2a") is None
    assert field.committed == 2.0
    # Unparsable text clears the price when focus leaves
    assert field.on_blur() == Commit(None)
    assert field.text == ""


def test_price_blur_does_not_recommit_same_value():
    field = PriceField(7.5)

    field.on_input("7.50")
    assert field.on_blur() is None
    assert field.text == "7.5"


@pytest.mark.parametrize(
    "value, text",
    [(None, ""), (12.0, "12"), (3.5, "3.5"), (0.0, "0"), (10.25, "10.25")],
)
def test_format_price(value, text):
    assert format_price(value) == text


@pytest.mark.parametrize("text, expected", [("", 1), ("  ", 1), ("4", 4), (" 12 ", 12)])
def test_parse_quantity_input(text, expected):
    assert parse_quantity_input(text) == expected


@pytest.mark.parametrize(
    "text, message",
    [("0", "greater than zero"), ("abc", "whole number"), ("2.5", "whole number")],
)
def test_parse_quantity_input_rejects(text, message):
    with pytest.raises(InvalidInputError, match=message):
        parse_quantity_input(text)


@pytest.mark.parametrize(
    "text, expected",
    [("", None), ("5", 5.0), ("5.25", 5.25), ("5,25", 5.25), ("0", 0.0)],
)
def test_parse_price_input(text, expected):
    assert parse_price_input(text) == expected


@pytest.mark.parametrize(
    "text, message",
    [("abc", "must be a number"), ("nan", "must be a number"), ("inf", "must be a number"),
     ("-1", "cannot be negative")],
)
def test_parse_price_input_rejects(text, message):
    with pytest.raises(InvalidInputError, match=message):
        parse_price_input(text)


def test_quantity_commit_normalizes_text():
    field = QuantityField(1)

    assert field.on_input("007") == Commit(7)
    assert field.text == "7"


@pytest.mark.parametrize(
    "field, text, expected",
    [
        (QuantityField(3), "0", Commit(1)),
        (QuantityField(3), "", Commit(1)),
        (QuantityField(3), "5", Commit(5)),
        (QuantityField(3), "3", None),
        (PriceField(None), "12.", Commit(12.0)),
        (PriceField(4.5), "", Commit(None)),
        (PriceField(4.5), "abc", Commit(None)),
        (PriceField(4.5), "4,50", None),
        (PriceField(None), "", None),
    ],
)
def test_apply_text_settles_input_then_blur(field, text, expected):
    assert apply_text(field, text) == expected
