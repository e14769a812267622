"""Demo host application - opens the chooser and shows what came back."""

from __future__ import annotations

from dataclasses import replace

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from filechooser.config import ChooserOptions
from filechooser.core.navigation import ChooserResult
from filechooser.screens.file_chooser import FileChooserScreen


class FileChooserApp(App):
    """Hosts a FileChooserScreen and reports its result."""

    TITLE = "filechooser"
    SUB_TITLE = "Pick a file or a directory"
    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("ctrl+o", "open_chooser", "Open", show=True),
        Binding("ctrl+d", "toggle_only_directories", "Dirs only", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(self, options: ChooserOptions | None = None, open_on_mount: bool = True) -> None:
        super().__init__()
        self.options = options or ChooserOptions()
        self.open_on_mount = open_on_mount
        self.last_result: ChooserResult | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="host-body"):
            yield Static("Press Ctrl+O to choose a path.", id="host-hint")
            yield Static("", id="host-mode")
            yield Static("[dim]Nothing chosen yet.[/dim]", id="host-result")
        yield Footer()

    def on_mount(self) -> None:
        self._show_mode()
        if self.open_on_mount:
            self.action_open_chooser()

    @property
    def chooser(self) -> FileChooserScreen | None:
        if isinstance(self.screen, FileChooserScreen):
            return self.screen
        return None

    def action_open_chooser(self) -> None:
        if self.chooser is not None:
            return
        self.push_screen(FileChooserScreen(self.options), callback=self._on_chooser_result)

    def action_toggle_only_directories(self) -> None:
        only = not self.options.only_directories
        self.options = replace(self.options, only_directories=only)
        if self.chooser is not None:
            self.chooser.update_options(only_directories=only)
        self._show_mode()
        self.notify(f"Directories only: {'on' if only else 'off'}")

    def _show_mode(self) -> None:
        mode = "directories only" if self.options.only_directories else "files or directories"
        self.query_one("#host-mode", Static).update(f"Mode: {mode}")

    def _on_chooser_result(self, result: ChooserResult | None) -> None:
        self.last_result = result
        label = self.query_one("#host-result", Static)
        if result is None or not result.accepted:
            label.update("[yellow]Cancelled.[/yellow]")
        else:
            label.update(Text(f"Chosen: {result.path}"))
