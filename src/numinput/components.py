from __future__ import annotations

from enum import Enum
from typing import Any

from textual import events

from .config import CHECKBOX_FALSE_CHAR, CHECKBOX_TRUE_CHAR, DEFAULT_CONFIG, InputConfig
from .spans import SpanBuilder


class CheckboxResponse(Enum):
    NONE = "none"
    EDITED = "edited"
    SUBMIT = "submit"
    EXIT = "exit"


class InputResponse(Enum):
    NONE = "none"
    INSERTED = "inserted"
    DELETED = "deleted"
    SUBMIT = "submit"
    CANCEL = "cancel"


class Checkbox:
    def __init__(self, value: bool = False, config: InputConfig | None = None) -> None:
        self.value = value
        self.config = config or DEFAULT_CONFIG

    def invert(self) -> None:
        self.value = not self.value

    def handle_event(self, event: Any) -> CheckboxResponse:
        if not isinstance(event, events.Key):
            return CheckboxResponse.NONE

        config = self.config
        if event.character in ("t", "y"):
            self.value = True
            return CheckboxResponse.EDITED
        if event.character in ("f", "n"):
            self.value = False
            return CheckboxResponse.EDITED
        if event.key in (config.increment_key, config.decrement_key):
            self.invert()
            return CheckboxResponse.EDITED
        if event.key == config.backspace_key:
            return CheckboxResponse.EXIT
        if event.key == config.submit_key:
            return CheckboxResponse.SUBMIT
        return CheckboxResponse.NONE

    def spans(self) -> SpanBuilder:
        builder = SpanBuilder()
        builder.push("> ")
        if self.value:
            builder.push(CHECKBOX_TRUE_CHAR, "accent")
        else:
            builder.push(CHECKBOX_FALSE_CHAR, "warning")
        return builder


class TextInput:
    """Free text editor; characters are only appended or popped at the end."""

    def __init__(
        self,
        value: str = "",
        error: str | None = None,
        focused: bool = False,
        config: InputConfig | None = None,
    ) -> None:
        self.value = value
        self.error = error
        self.focused = focused
        self.config = config or DEFAULT_CONFIG

    def handle_event(self, event: Any) -> InputResponse:
        if not isinstance(event, events.Key):
            return InputResponse.NONE

        config = self.config
        if event.key == config.submit_key:
            return InputResponse.SUBMIT
        if event.key == config.cancel_key:
            return InputResponse.CANCEL
        if event.key == config.backspace_key:
            self.value = self.value[:-1]
            return InputResponse.DELETED
        if event.is_printable and event.character is not None:
            self.value += event.character
            return InputResponse.INSERTED
        return InputResponse.NONE

    def spans(self) -> SpanBuilder:
        builder = SpanBuilder()
        if self.focused:
            builder.push("> ")
            builder.push(self.value, "accent")
            if self.error is not None:
                builder.push(f" {self.error}", "error")
        elif self.error is not None:
            builder.push(self.value, "error")
        else:
            builder.push(self.value)
        return builder
