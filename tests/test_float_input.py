import math

import numpy as np
import pytest
from textual import events

from numinput.datatypes import FLOAT_TYPE_SPECS
from numinput.float_input import (
    FloatInput,
    FloatNum,
    FloatParseError,
    Infinity,
    NaN,
    float_value_from,
)
from numinput.num_input import NumInputResponse


def _key(name: str, character: str | None = None) -> events.Key:
    return events.Key(name, character)


def _type(editor: FloatInput, text: str) -> None:
    for char in text:
        editor.push_digit(char)


def test_typing_whole_point_and_fraction() -> None:
    editor = FloatInput(0.0)
    _type(editor, "12.5")
    assert editor.display_text() == "12.5"
    assert editor.value() == 12.5
    assert editor.spans().plain == "+ 12.5"


def test_backspace_through_empty_fraction_drops_point() -> None:
    editor = FloatInput(3.0)
    editor.push_digit(".")
    assert editor.display_text() == "3."
    editor.remove_digit()
    assert editor.display_text() == "3"
    editor.remove_digit()
    assert editor.display_text() == ""
    assert editor.value() == 0.0


def test_backspace_pops_fraction_digits_first() -> None:
    editor = FloatInput(1.25)
    editor.remove_digit()
    assert editor.state == FloatNum(whole="1", integral="2")
    editor.remove_digit()
    editor.remove_digit()
    assert editor.state == FloatNum(whole="1", integral=None)


def test_cycle_returns_to_finite_zero() -> None:
    editor = FloatInput(42.5)
    editor.cycle()
    assert editor.state == Infinity(negative=False)
    editor.cycle()
    assert editor.state == NaN()
    editor.cycle()
    assert editor.state == FloatNum()
    assert editor.value() == 0.0


def test_cycle_keeps_sign_into_infinity() -> None:
    editor = FloatInput(-2.0)
    editor.cycle()
    assert editor.state == Infinity(negative=True)
    assert editor.value() == -math.inf
    assert editor.spans().plain == "- inf"


def test_leading_zeros_trimmed_in_whole_part_only() -> None:
    editor = FloatInput(0.0)
    _type(editor, "007")
    assert editor.display_text() == "7"
    _type(editor, ".007")
    assert editor.display_text() == "7.007"


def test_second_point_is_ignored() -> None:
    editor = FloatInput(0.0)
    assert editor.push_digit("1")
    assert editor.push_digit(".")
    assert not editor.push_digit(".")
    assert not editor.push_digit("x")
    assert editor.display_text() == "1."
    assert editor.value() == 1.0


def test_sign_toggle_is_unconditional() -> None:
    editor = FloatInput(0.0)
    editor.toggle_sign()
    assert editor.spans().plain == "- 0"
    value = editor.value()
    assert value == 0.0
    assert math.copysign(1.0, value) < 0


def test_infinity_ignores_digits_but_toggles_sign() -> None:
    editor = FloatInput(math.inf)
    assert not editor.push_digit("5")
    editor.remove_digit()
    editor.toggle_sign()
    assert editor.state == Infinity(negative=True)


def test_nan_ignores_everything_but_cycle() -> None:
    editor = FloatInput(math.nan)
    for key in (_key("5", "5"), _key("minus", "-"), _key("backspace")):
        editor.handle_event(key)
    assert editor.state == NaN()
    assert np.isnan(editor.value())
    assert editor.spans().plain == "> NaN"
    editor.handle_event(_key("tab", "\t"))
    assert editor.state == FloatNum()


def test_handle_event_end_to_end() -> None:
    editor = FloatInput(0.0, FLOAT_TYPE_SPECS["single"])
    for name, char in (("1", "1"), ("full_stop", "."), ("2", "2"), ("minus", "-")):
        assert editor.handle_event(_key(name, char)) is NumInputResponse.NONE
    value = editor.value()
    assert isinstance(value, np.float32)
    assert value == np.float32(-1.2)
    assert editor.handle_event(_key("enter", "\r")) is NumInputResponse.SUBMIT
    assert editor.handle_event(_key("escape")) is NumInputResponse.CANCEL
    assert editor.handle_event(events.Blur()) is NumInputResponse.NONE


def test_float_value_from_decomposes_text() -> None:
    double = FLOAT_TYPE_SPECS["double"]
    assert float_value_from(-12.75, double) == FloatNum("12", "75", True)
    assert float_value_from(100.0, double) == FloatNum("100", None, False)
    assert float_value_from(-0.0, double) == FloatNum("0", None, True)
    assert float_value_from(-math.inf, double) == Infinity(negative=True)
    assert float_value_from(math.nan, double) == NaN()


def test_set_replaces_state() -> None:
    editor = FloatInput(1.0)
    editor.set(math.inf)
    assert editor.state == Infinity()
    editor.set(0.5)
    assert editor.display_text() == "0.5"


def test_parse_error_on_unexpected_text(monkeypatch: pytest.MonkeyPatch) -> None:
    double = FLOAT_TYPE_SPECS["double"]
    monkeypatch.setattr(type(double), "format_positional", lambda self, value: "1e5")
    with pytest.raises(FloatParseError):
        float_value_from(1e5, double)
    monkeypatch.setattr(type(double), "format_positional", lambda self, value: ".5")
    with pytest.raises(FloatParseError):
        float_value_from(0.5, double)
