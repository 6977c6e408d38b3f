from __future__ import annotations

import argparse
import logging

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static

from .datatypes import FLOAT_TYPE_SPECS, INT_TYPE_SPECS
from .float_input import FloatInput
from .num_input import SignedIntInput, UnsignedIntInput
from .widgets import EditorWidget

logger = logging.getLogger(__name__)

TITLES = {
    "signed": "Signed (int32_t)",
    "unsigned": "Unsigned (uint8_t)",
    "float": "Float (double, Tab cycles inf/NaN)",
}


class NumInputDemoApp(App):
    TITLE = "Numeric Input"
    CSS = """
    Vertical {
        padding: 1 2;
    }
    Label {
        margin-top: 1;
        text-style: bold;
    }
    #status {
        margin-top: 1;
        color: $text-muted;
    }
    """

    status_text = "Enter submits, Escape cancels."

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(TITLES["signed"])
            yield EditorWidget(SignedIntInput(0, INT_TYPE_SPECS["int32_t"]), id="signed")
            yield Label(TITLES["unsigned"])
            yield EditorWidget(UnsignedIntInput(0, INT_TYPE_SPECS["uint8_t"]), id="unsigned")
            yield Label(TITLES["float"])
            yield EditorWidget(FloatInput(0.0, FLOAT_TYPE_SPECS["double"]), id="float")
            yield Static(self.status_text, id="status")

    def on_mount(self) -> None:
        self.query_one("#signed", EditorWidget).focus()

    def on_editor_widget_submitted(self, message: EditorWidget.Submitted) -> None:
        key = message.editor_widget.id or ""
        logger.info("Submitted %s = %r", key, message.value)
        self.status_text = (
            f"Submitted {TITLES.get(key, key).split()[0].lower()} value: {message.value}"
        )
        self.query_one("#status", Static).update(self.status_text)

    def on_editor_widget_cancelled(self, message: EditorWidget.Cancelled) -> None:
        self.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Numeric input editors demo")
    parser.add_argument("--log-file", help="Write log records to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    # the terminal belongs to the UI, so records only go to a file
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    NumInputDemoApp().run()
