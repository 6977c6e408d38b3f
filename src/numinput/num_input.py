"""Keystroke-driven editors for bounded integers.

Digits are folded in arithmetically (multiply by ten, then add or subtract
the digit) with saturating operations, so typing more digits than the width
can hold pins the value at the bound instead of overflowing.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from textual import events

from .config import DEFAULT_CONFIG, InputConfig
from .datatypes import INT_TYPE_SPECS, IntegerTypeSpec, is_ascii_digit
from .spans import SpanBuilder

logger = logging.getLogger(__name__)


class NumInputResponse(Enum):
    NONE = "none"
    SUBMIT = "submit"
    CANCEL = "cancel"


class _IntInput:
    signed: bool

    def __init__(
        self,
        initial_value: int,
        spec: IntegerTypeSpec,
        config: InputConfig | None = None,
    ) -> None:
        if spec.signed != self.signed:
            kind = "signed" if self.signed else "unsigned"
            raise ValueError(f"{type(self).__name__} needs {kind} integers, got {spec.name}")
        self.spec = spec
        self.config = config or DEFAULT_CONFIG
        self.current = spec.clamp(initial_value)

    def set(self, value: int) -> None:
        clamped, overflow, underflow = self.spec.saturate(value)
        if overflow or underflow:
            logger.debug("%s: %d saturated to %d", self.spec.name, value, clamped)
        elif clamped != self.current and clamped in (self.spec.min_value, self.spec.max_value):
            logger.debug("%s: reached bound %d", self.spec.name, clamped)
        self.current = clamped

    def add(self, value: int) -> _IntInput:
        self.set(self.spec.saturating_add(self.current, value))
        return self

    def sub(self, value: int) -> _IntInput:
        self.set(self.spec.saturating_sub(self.current, value))
        return self

    def multiply(self, value: int) -> _IntInput:
        self.set(self.spec.saturating_mul(self.current, value))
        return self

    def remove_digit(self) -> None:
        self.set(self.spec.trunc_div(self.current, 10))

    def value(self) -> Any:
        return self.spec.from_int(self.current)

    def append_digit(self, digit: str) -> bool:
        if not is_ascii_digit(digit):
            return False
        self.multiply(10).add(int(digit))
        return True

    def _prefix(self) -> str:
        raise NotImplementedError

    def spans(self) -> SpanBuilder:
        builder = SpanBuilder()
        builder.push(self._prefix(), "accent")
        builder.push(str(abs(self.current)))
        if self.current == self.spec.max_value:
            builder.push(self.config.max_annotation, "muted")
        elif self.current == self.spec.min_value:
            builder.push(self.config.min_annotation, "muted")
        return builder

    def _handle_char(self, char: str) -> None:
        self.append_digit(char)

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
        elif event.key == config.increment_key:
            self.add(1)
        elif event.key == config.decrement_key:
            self.sub(1)
        elif event.is_printable and event.character is not None:
            self._handle_char(event.character)
        return NumInputResponse.NONE


class SignedIntInput(_IntInput):
    """Signed editor; `negative` is display state that survives a zero value."""

    signed = True

    def __init__(
        self,
        initial_value: int = 0,
        spec: IntegerTypeSpec = INT_TYPE_SPECS["int32_t"],
        config: InputConfig | None = None,
    ) -> None:
        super().__init__(initial_value, spec, config)
        self.negative = self.current < 0

    @property
    def is_negative(self) -> bool:
        return self.negative

    def set(self, value: int) -> None:
        super().set(value)
        # keep the typed sign while all digits are removed
        if value != 0:
            self.negative = value < 0

    def invert(self) -> None:
        if self.current == 0:
            self.negative = not self.negative
        else:
            self.set(self.spec.saturating_sub(0, self.current))
        logger.debug("%s: inverted sign, negative=%s", self.spec.name, self.negative)

    def append_digit(self, digit: str) -> bool:
        if not is_ascii_digit(digit):
            return False
        if self.negative:
            self.multiply(10).sub(int(digit))
        else:
            self.multiply(10).add(int(digit))
        return True

    def _prefix(self) -> str:
        return "- " if self.negative else "+ "

    def _handle_char(self, char: str) -> None:
        if not self.append_digit(char) and char == "-":
            self.invert()


class UnsignedIntInput(_IntInput):
    signed = False

    def __init__(
        self,
        initial_value: int = 0,
        spec: IntegerTypeSpec = INT_TYPE_SPECS["uint32_t"],
        config: InputConfig | None = None,
    ) -> None:
        super().__init__(initial_value, spec, config)

    def _prefix(self) -> str:
        return "> "
