from __future__ import annotations

from typing import Iterator, Mapping

from rich.text import Text

from .config import DEFAULT_THEME


class SpanBuilder:
    """Ordered (text, style tag) fragments for one rendered line.

    Style tags are symbolic; `to_text` resolves them through a theme so the
    rendering surface decides the actual colors.
    """

    def __init__(self) -> None:
        self._spans: list[tuple[str, str]] = []

    def push(self, text: str, style: str = "plain") -> None:
        self._spans.append((text, style))

    def extend(self, other: SpanBuilder) -> None:
        self._spans.extend(other)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._spans)

    def __len__(self) -> int:
        return len(self._spans)

    def __repr__(self) -> str:
        return f"SpanBuilder({self._spans!r})"

    @property
    def plain(self) -> str:
        return "".join(text for text, _style in self._spans)

    def to_text(self, theme: Mapping[str, str] | None = None) -> Text:
        styles = DEFAULT_THEME if theme is None else theme
        text = Text()
        for fragment, tag in self._spans:
            text.append(fragment, style=styles.get(tag, ""))
        return text
