"""Tests for decoding the options argument."""

import logging

import pytest

from layoutinspect.tooling import SerializationOptions


@pytest.mark.parametrize("args,with_bounds,with_constraints", [
    ("0", False, False),
    ("1", True, False),
    ("2", False, True),
    ("3", True, True),
    ("+1", True, False),
    ("7", True, True),
    ("-1", True, True),
    ("2147483647", True, True),
])
def test_integer_options(args, with_bounds, with_constraints):
    options = SerializationOptions.parse(args)
    assert options.with_bounds is with_bounds
    assert options.with_constraints is with_constraints


@pytest.mark.parametrize("args", [None, "", "abc", " 3", "3 ", "1.5", "0x3", "1_0", "2147483648", "٣"])
def test_non_integer_falls_back_to_everything(args):
    """Anything that is not a plain 32-bit integer includes both sections."""
    assert SerializationOptions.parse(args) == SerializationOptions(True, True)


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="layoutinspect.tooling.options"):
        SerializationOptions.parse("abc")
    assert "not an integer" in caplog.text


@pytest.mark.parametrize("flags", [0, 1, 2, 3])
def test_flags_round_trip(flags):
    assert SerializationOptions.from_flags(flags).to_flags() == flags
