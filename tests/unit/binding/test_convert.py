"""Tests for the generic string converter."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from querybind.binding.convert import convert
from querybind.core.exceptions import DecodeError
from tests.fakes import Color, Level, State


@pytest.mark.parametrize(
    ("raw", "target", "expected"),
    [
        ("str", str, "str"),
        ("5", int, 5),
        ("-3", int, -3),
        ("1.5", float, 1.5),
        ("1", float, 1.0),
        ("true", bool, True),
        ("0", bool, False),
        ("12.50", Decimal, Decimal("12.50")),
        ("2024-02-29", date, date(2024, 2, 29)),
    ],
)
def test_converts_primitives(raw, target, expected):
    assert convert(raw, target) == expected


@pytest.mark.parametrize(
    ("raw", "target"),
    [("str", int), ("1.1.1", float), ("maybe", bool), ("2024-13-01", date)],
)
def test_rejects_invalid_input(raw, target):
    with pytest.raises(DecodeError) as info:
        convert(raw, target)
    assert info.value.value == raw
    assert str(info.value)


class TestEnums:
    def test_matches_value(self):
        assert convert("green", Color) is Color.GREEN

    def test_matches_int_value(self):
        assert convert("2", Level) is Level.HIGH

    def test_matches_name(self):
        assert convert("HIGH", Level) is Level.HIGH

    def test_rejects_unknown_member(self):
        with pytest.raises(DecodeError):
            convert("blue", Color)


def test_int_subclass_is_rewrapped():
    value = convert("2", State)
    assert type(value) is State
    assert value == 2


def test_unsupported_type_is_a_decode_error():
    class Opaque:
        def __init__(self, a, b):
            pass

    with pytest.raises(DecodeError):
        convert("x", Opaque)
