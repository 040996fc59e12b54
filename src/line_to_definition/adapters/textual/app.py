"""Executable Textual app that draws connectors next to a code editor."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use line_to_definition.adapters.textual.app"
    ) from exc

from line_to_definition.config import EDITOR_SECTION
from line_to_definition.config.style import SECTION
from line_to_definition.host import (
    DictConfigurationSource,
    DocumentWorkspace,
    PatternDefinitionResolver,
    TextDocument,
)
from line_to_definition.session import create_state_machine

from .canvas import CanvasRenderer
from .controller import TextualConnectorAdapter, TextualUIHooks

DOCUMENT_ID = "demo"
COLOR_CYCLE = ("red", "green", "blue", "yellow", "magenta")

SAMPLE_TEXT = '''\
import os

GREETING = "hello"


def greet(name):
    message = GREETING + ", " + name
    return message


class Greeter:
    def run(self):
        return greet(os.getlogin())
'''


class LineToDefinitionApp(App[None]):
    """Editor on the left, connector preview on the right."""

    CSS = """
	#editor {
		width: 1fr;
	}

	#preview {
		width: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+r", "cycle_color", "Cycle line color"),
    ]

    def __init__(self, *, text: str, font_size: float) -> None:
        super().__init__()
        self._text = text
        self.settings = DictConfigurationSource(
            {EDITOR_SECTION: {"fontSize": font_size}, SECTION: {}}
        )
        self.workspace = DocumentWorkspace(
            [TextDocument.from_text(DOCUMENT_ID, text)]
        )
        self.renderer = CanvasRenderer()
        # Raises MissingEditorMetric before the UI starts.
        self.machine = create_state_machine(
            self.settings,
            words=self.workspace,
            resolver=PatternDefinitionResolver(self.workspace),
            renderer=self.renderer,
        )
        self.adapter = TextualConnectorAdapter(
            self.machine,
            self.machine.style,
            TextualUIHooks(
                refresh_overlay=self._refresh_preview,
                update_status=self._update_status,
            ),
        )
        self._color_index = 0
        self._mounted = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield TextArea(self._text, id="editor")
            yield Static("", id="preview")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self._mounted = True
        self._refresh_preview()

    def on_unmount(self) -> None:
        self._mounted = False
        self.adapter.shutdown()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.workspace.open(TextDocument.from_text(DOCUMENT_ID, event.text_area.text))
        self.adapter.shutdown()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        row, column = event.selection.end
        self.run_worker(
            self.adapter.handle_cursor(DOCUMENT_ID, row, column),
            group="connector",
        )

    def action_cycle_color(self) -> None:
        self._color_index = (self._color_index + 1) % len(COLOR_CYCLE)
        self.settings.update(SECTION, lineColor=COLOR_CYCLE[self._color_index])
        self.adapter.handle_configuration_changed()
        self._update_status(f"line color: {COLOR_CYCLE[self._color_index]}")

    def _refresh_preview(self) -> None:
        document = self.workspace.get(DOCUMENT_ID)
        if document is None or not self._mounted:
            return
        lines = list(document.snapshot())
        painted = self.renderer.paint(lines)
        rendered = Text()
        for row, line in enumerate(lines):
            columns = [col for (r, col) in painted if r == row]
            width = max([len(line)] + [col + 1 for col in columns])
            padded = line.ljust(width)
            for column, char in enumerate(padded):
                cell = painted.get((row, column))
                if cell is None:
                    rendered.append(char)
                    continue
                glyph, descriptor = cell
                style = descriptor.color
                if descriptor.opacity_percent < 50:
                    style = f"dim {style}"
                rendered.append(glyph, style=style)
            rendered.append("\n")
        self.query_one("#preview", Static).update(rendered)

    def _update_status(self, status: str) -> None:
        if self._mounted:
            self.query_one("#status-line", Static).update(status)


def _env_float(key: str, fallback: float) -> float:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Draw a line from the word under the cursor to its definition."
    )
    parser.add_argument("path", nargs="?", help="File to open (default: sample)")
    parser.add_argument(
        "--font-size",
        type=float,
        default=_env_float("LINE_TO_DEFINITION_FONT_SIZE", 14.0),
        help="Editor font size used to derive the line height (default: 14)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else SAMPLE_TEXT
    app = LineToDefinitionApp(text=text, font_size=args.font_size)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
