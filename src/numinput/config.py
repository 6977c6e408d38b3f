from __future__ import annotations

from dataclasses import dataclass

MAX_ANNOTATION = " (max value)"
MIN_ANNOTATION = " (min value)"

INFINITY_TEXT = "inf"
NAN_TEXT = "NaN"

CHECKBOX_TRUE_CHAR = "☑"
CHECKBOX_FALSE_CHAR = "☐"

DEFAULT_THEME: dict[str, str] = {
    "plain": "",
    "accent": "green",
    "muted": "grey50",
    "warning": "yellow",
    "error": "bold red",
}


@dataclass(frozen=True)
class InputConfig:
    """Key names (textual naming) and annotation text shared by the editors."""

    submit_key: str = "enter"
    cancel_key: str = "escape"
    backspace_key: str = "backspace"
    increment_key: str = "up"
    decrement_key: str = "down"
    cycle_key: str = "tab"
    max_annotation: str = MAX_ANNOTATION
    min_annotation: str = MIN_ANNOTATION


DEFAULT_CONFIG = InputConfig()
