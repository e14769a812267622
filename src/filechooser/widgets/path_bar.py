"""Breadcrumb row - home button, "..", parent label and current directory."""

from __future__ import annotations

from pathlib import Path

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static

from filechooser.core.breadcrumb import Breadcrumb, breadcrumb_for


class PathBar(Widget):
    """Shows where the chooser is and lets the user climb back up."""

    class HomeClicked(Message):
        """Posted when the home button is pressed."""

    class ParentClicked(Message):
        """Posted when ".." or the parent label is pressed and going up is allowed."""

    def __init__(self, path: Path | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._breadcrumb = breadcrumb_for(path or Path.cwd())

    @property
    def breadcrumb(self) -> Breadcrumb:
        return self._breadcrumb

    def compose(self) -> ComposeResult:
        yield Button("Home", id="path-home", classes="path-chip")
        yield Static("Current path:", id="path-caption")
        yield Button("..", id="path-up", classes="path-chip")
        yield Button(Text(self._breadcrumb.parent_label), id="path-parent", classes="path-chip")
        yield Static(Text(self._breadcrumb.current_label), id="path-current")

    def on_mount(self) -> None:
        self._apply()

    def set_path(self, path: Path) -> None:
        self._breadcrumb = breadcrumb_for(path)
        if self.is_mounted:
            self._apply()

    def _apply(self) -> None:
        crumb = self._breadcrumb
        self.query_one("#path-parent", Button).label = Text(crumb.parent_label)
        current = self.query_one("#path-current", Static)
        current.update(Text(crumb.current_label))
        current.display = bool(crumb.current_label)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "path-home":
            self.post_message(self.HomeClicked())
        elif event.button.id in ("path-up", "path-parent"):
            if self._breadcrumb.can_go_up:
                self.post_message(self.ParentClicked())
