"""Modal file/directory chooser."""

from __future__ import annotations

import logging
from dataclasses import replace

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, ListView, Static

from filechooser.config import ChooserOptions
from filechooser.core.lister import Entry, list_entries
from filechooser.core.navigation import ChooserResult, NavigationState, Navigator
from filechooser.widgets.entry_list import EntryList
from filechooser.widgets.path_bar import PathBar

logger = logging.getLogger(__name__)


class FileChooserScreen(ModalScreen[ChooserResult]):
    """Browse the filesystem and pick a directory or a file.

    Dismisses exactly once with a ``ChooserResult``: ``(path, True)`` on
    accept, ``(None, False)`` on cancel or close.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("backspace", "parent", "Up"),
        Binding("ctrl+r", "home", "Home"),
        Binding("space", "select_highlighted", "Select"),
        Binding("ctrl+t", "toggle_hidden", "Hidden files"),
    ]

    DEFAULT_CSS = """
    FileChooserScreen {
        align: center middle;
    }

    #chooser-container {
        width: 80%;
        height: 80%;
        border: round $primary;
        background: $surface;
    }

    #chooser-titlebar {
        height: 3;
        background: $primary;
        padding: 0 1;
    }

    #chooser-title {
        width: 1fr;
        content-align: left middle;
        height: 3;
    }

    PathBar {
        layout: horizontal;
        height: 3;
    }

    #path-caption, #path-current {
        height: 3;
        content-align: left middle;
        padding: 0 1;
    }

    #path-caption {
        text-style: bold;
        width: auto;
    }

    #path-current {
        width: auto;
        color: $accent;
    }

    .path-chip {
        min-width: 4;
        margin: 0 1 0 0;
    }

    EntryList {
        height: 1fr;
    }

    #entry-view {
        height: 1fr;
    }

    .entry-dir {
        color: $warning;
    }

    EntryItem.-chosen {
        background: $boost;
        text-style: bold reverse;
    }

    #chooser-buttons {
        height: auto;
        align-horizontal: right;
    }

    #chooser-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(
        self,
        options: ChooserOptions | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        super().__init__()
        self.options = options or ChooserOptions()
        self.navigator = navigator or Navigator()
        self.entries: list[Entry] = []
        self._resolved = False
        self._unsubscribe = None
        self._apply_options()

    def compose(self) -> ComposeResult:
        state = self.navigator.state
        with Vertical(id="chooser-container"):
            with Horizontal(id="chooser-titlebar"):
                yield Static(Text(self.options.title), id="chooser-title")
                yield Button("X", variant="error", id="chooser-close")
            yield PathBar(state.current_path, id="chooser-path")
            yield EntryList(id="chooser-entries")
            with Horizontal(id="chooser-buttons"):
                yield Button(self.options.accept_title, variant="primary", id="chooser-accept")
                yield Button(self.options.cancel_title, variant="error", id="chooser-cancel")

    def on_mount(self) -> None:
        self._unsubscribe = self.navigator.subscribe(self._on_state_changed)
        self._apply_chrome()
        self._schedule_refresh()
        self.query_one("#entry-view", ListView).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # === Options ===

    def update_options(self, **changes) -> None:
        """Re-apply host configuration while the chooser is open."""
        self.options = replace(self.options, **changes)
        self._apply_options()
        if self.is_mounted:
            self._apply_chrome()
            self._schedule_refresh()

    def _apply_options(self) -> None:
        self.navigator.set_selection_mode(self.options.only_directories)
        self.navigator.apply_base_directory_once(self.options.base_directory)

    def _apply_chrome(self) -> None:
        options = self.options
        self.query_one("#chooser-container").display = options.visible
        self.query_one("#chooser-title", Static).update(Text(options.title))
        self.query_one("#chooser-accept", Button).label = options.accept_title
        self.query_one("#chooser-cancel", Button).label = options.cancel_title

    # === Rendering ===

    def _on_state_changed(self, state: NavigationState) -> None:
        self._schedule_refresh()

    def _schedule_refresh(self) -> None:
        self.call_later(self._refresh_view, self.navigator.generation)

    async def _refresh_view(self, generation: int) -> None:
        if not self.is_mounted:
            return
        if generation < self.navigator.generation:
            # A later navigation has its own refresh queued.
            return
        state = self.navigator.state
        self.entries = list_entries(
            state.current_path,
            state.selection_mode,
            show_hidden=self.options.show_hidden,
        )
        self.query_one(PathBar).set_path(state.current_path)
        self.query_one("#chooser-accept", Button).disabled = (
            self.navigator.resolve_accept() is None
        )
        await self.query_one(EntryList).show(self.entries, state.selected_entry)

    # === Gestures ===

    def activate_entry(self, entry: Entry) -> None:
        """Open a directory, or select a file."""
        if entry.is_directory:
            self.navigator.navigate_to(entry.path)
        else:
            self.navigator.select(entry)

    def on_entry_list_entry_chosen(self, event: EntryList.EntryChosen) -> None:
        self.activate_entry(event.entry)

    def on_path_bar_home_clicked(self, event: PathBar.HomeClicked) -> None:
        self.navigator.navigate_home()

    def on_path_bar_parent_clicked(self, event: PathBar.ParentClicked) -> None:
        self.navigator.navigate_to_parent()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "chooser-accept":
            self.action_accept()
        elif event.button.id in ("chooser-cancel", "chooser-close"):
            self.action_cancel()

    def action_accept(self) -> None:
        result = self.navigator.resolve_accept()
        if result is None:
            return
        self._finish(result)

    def action_cancel(self) -> None:
        self._finish(self.navigator.resolve_cancel())

    def action_parent(self) -> None:
        self.navigator.navigate_to_parent()

    def action_home(self) -> None:
        self.navigator.navigate_home()

    def action_select_highlighted(self) -> None:
        entry = self.query_one(EntryList).highlighted_entry
        if entry is not None:
            self.navigator.select(entry)

    def action_toggle_hidden(self) -> None:
        self.update_options(show_hidden=not self.options.show_hidden)

    def _finish(self, result: ChooserResult) -> None:
        if self._resolved:
            return
        self._resolved = True
        logger.debug("Chooser closed with %s", result)
        self.dismiss(result)
