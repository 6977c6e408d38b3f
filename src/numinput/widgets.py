from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from .config import InputConfig
from .spans import SpanBuilder

logger = logging.getLogger(__name__)

FOCUS_KEYS = ("tab", "shift+tab")


class Editor(Protocol):
    config: InputConfig

    def handle_event(self, event: Any) -> Any: ...

    def spans(self) -> SpanBuilder: ...


class EditorWidget(Widget, can_focus=True):
    """Hosts one editor: keys go to the editor, its spans are the widget content."""

    DEFAULT_CSS = """
    EditorWidget {
        height: 1;
        width: 1fr;
    }
    EditorWidget:focus {
        background: $boost;
    }
    """

    class Submitted(Message):
        def __init__(self, editor_widget: EditorWidget, value: Any) -> None:
            super().__init__()
            self.editor_widget = editor_widget
            self.value = value

    class Cancelled(Message):
        def __init__(self, editor_widget: EditorWidget) -> None:
            super().__init__()
            self.editor_widget = editor_widget

    def __init__(
        self,
        editor: Editor,
        *,
        style_theme: Mapping[str, str] | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.editor = editor
        self.style_theme = style_theme

    def render(self) -> Text:
        return self.editor.spans().to_text(self.style_theme)

    def _consumes(self, event: events.Key) -> bool:
        # focus navigation stays with the screen unless the editor binds it
        if event.key in FOCUS_KEYS:
            return event.key == self.editor.config.cycle_key and hasattr(self.editor, "cycle")
        return True

    def on_key(self, event: events.Key) -> None:
        if not self._consumes(event):
            return
        event.stop()
        event.prevent_default()

        response = self.editor.handle_event(event)
        self.refresh()
        if response.value == "submit":
            value = getattr(self.editor, "value", None)
            if callable(value):
                value = value()
            logger.debug("%s submitted %r", self.id or type(self.editor).__name__, value)
            self.post_message(self.Submitted(self, value))
        elif response.value in ("cancel", "exit"):
            logger.debug("%s cancelled", self.id or type(self.editor).__name__)
            self.post_message(self.Cancelled(self))
