"""Keystroke-driven editor for floating point values.

A finite number is kept as the digit strings the user typed (whole part,
optional fractional part, sign flag) and only parsed when the value is read,
so editing never round-trips through a native float.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from textual import events

from .config import DEFAULT_CONFIG, INFINITY_TEXT, NAN_TEXT, InputConfig
from .datatypes import FLOAT_TYPE_SPECS, FloatTypeSpec, is_ascii_digit
from .num_input import NumInputResponse
from .spans import SpanBuilder

logger = logging.getLogger(__name__)


class FloatClassificationError(ValueError):
    """The value is neither finite, infinite nor NaN."""


class FloatParseError(ValueError):
    """The positional text of a finite value did not split into digit strings."""


@dataclass
class FloatNum:
    whole: str = "0"
    # None until a decimal point is typed; "" means point typed, no digits yet
    integral: str | None = None
    negative: bool = False


@dataclass
class Infinity:
    negative: bool = False


@dataclass
class NaN:
    pass


FloatValue = FloatNum | Infinity | NaN


def _check_digits(part: str, text: str) -> None:
    if not all(is_ascii_digit(char) for char in part):
        raise FloatParseError(f"Non-digit characters in {text!r}")


def float_value_from(value: Any, spec: FloatTypeSpec) -> FloatValue:
    classification = spec.classify(value)
    if classification == "nan":
        return NaN()
    if classification == "infinite":
        return Infinity(negative=bool(value < 0))
    if classification != "finite":
        raise FloatClassificationError(f"Cannot classify {value!r} as {spec.name}")

    text = spec.format_positional(value)
    negative = text.startswith("-")
    unsigned = text.lstrip("+-")
    whole, point, fraction = unsigned.partition(".")
    if not whole:
        raise FloatParseError(f"Empty whole part in {text!r}")
    _check_digits(whole, text)
    _check_digits(fraction, text)
    return FloatNum(
        whole=whole,
        integral=fraction if point else None,
        negative=negative,
    )


class FloatInput:
    def __init__(
        self,
        initial_value: Any = 0.0,
        spec: FloatTypeSpec = FLOAT_TYPE_SPECS["double"],
        config: InputConfig | None = None,
    ) -> None:
        self.spec = spec
        self.config = config or DEFAULT_CONFIG
        self.state: FloatValue = float_value_from(initial_value, spec)

    def set(self, value: Any) -> None:
        self.state = float_value_from(value, self.spec)

    def push_digit(self, char: str) -> bool:
        state = self.state
        if not isinstance(state, FloatNum):
            return False

        if is_ascii_digit(char):
            if state.integral is not None:
                state.integral += char
            else:
                state.whole = (state.whole + char).lstrip("0")
            return True
        if char == "." and state.integral is None:
            state.integral = ""
            return True
        return False

    def toggle_sign(self) -> None:
        match self.state:
            case FloatNum() | Infinity() as state:
                state.negative = not state.negative
            case NaN():
                pass

    def remove_digit(self) -> None:
        state = self.state
        if not isinstance(state, FloatNum):
            return
        if state.integral is None:
            state.whole = state.whole[:-1]
        elif state.integral:
            state.integral = state.integral[:-1]
        else:
            state.integral = None

    def cycle(self) -> None:
        match self.state:
            case FloatNum(negative=negative):
                self.state = Infinity(negative=negative)
            case Infinity():
                self.state = NaN()
            case NaN():
                self.state = FloatNum()
        logger.debug("%s input switched to %s", self.spec.name, type(self.state).__name__)

    def value(self) -> Any:
        match self.state:
            case FloatNum(whole=whole, integral=integral, negative=negative):
                text = whole or "0"
                if integral is not None:
                    text = f"{text}.{integral}"
                parsed = self.spec.parse(text)
                return -parsed if negative else parsed
            case Infinity(negative=negative):
                return self.spec.infinity(negative)
            case NaN():
                return self.spec.nan()

    def display_text(self) -> str:
        match self.state:
            case FloatNum(whole=whole, integral=None):
                return whole
            case FloatNum(whole=whole, integral=integral):
                return f"{whole}.{integral}"
            case Infinity():
                return INFINITY_TEXT
            case NaN():
                return NAN_TEXT

    def spans(self) -> SpanBuilder:
        builder = SpanBuilder()
        match self.state:
            case FloatNum(negative=negative):
                builder.push("- " if negative else "+ ", "accent")
                builder.push(self.display_text())
            case Infinity(negative=negative):
                builder.push("- " if negative else "+ ", "accent")
                builder.push(self.display_text(), "muted")
            case NaN():
                builder.push("> ", "accent")
                builder.push(self.display_text(), "muted")
        return builder

    def handle_event(self, event: Any) -> NumInputResponse:
        if not isinstance(event, events.Key):
            return NumInputResponse.NONE

        config = self.config
        if event.key == config.submit_key:
            return NumInputResponse.SUBMIT
        if event.key == config.cancel_key:
            return NumInputResponse.CANCEL
        if event.key == config.backspace_key:
            self.remove_digit()
        elif event.key == config.cycle_key:
            self.cycle()
        elif event.character == "-":
            self.toggle_sign()
        elif event.is_printable and event.character is not None:
            self.push_digit(event.character)
        return NumInputResponse.NONE
