"""Listing of the directory being browsed."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Label, ListItem, ListView, Static

from filechooser.core.lister import Entry


class EntryItem(ListItem):
    """One row of the listing."""

    def __init__(self, entry: Entry, chosen: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.entry = entry
        self.add_class("entry-dir" if entry.is_directory else "entry-file")
        if chosen:
            self.add_class("-chosen")

    @property
    def chosen(self) -> bool:
        return self.has_class("-chosen")

    def compose(self) -> ComposeResult:
        suffix = "/" if self.entry.is_directory else ""
        yield Label(Text(self.entry.name + suffix))


class EntryList(Widget):
    """Directory listing that reports which entry the user picked."""

    class EntryChosen(Message):
        """Posted when an entry is clicked or activated with enter."""
        def __init__(self, entry: Entry) -> None:
            super().__init__()
            self.entry = entry

    def compose(self) -> ComposeResult:
        yield ListView(id="entry-view")
        yield Static("[dim](empty)[/dim]", id="entry-empty")

    @property
    def items(self) -> list[EntryItem]:
        return list(self.query(EntryItem))

    @property
    def highlighted_entry(self) -> Entry | None:
        child = self.query_one("#entry-view", ListView).highlighted_child
        if isinstance(child, EntryItem):
            return child.entry
        return None

    async def show(self, entries: Sequence[Entry], selected: Path | None = None) -> None:
        """Replace the listing with ``entries``, marking ``selected``."""
        view = self.query_one("#entry-view", ListView)
        await view.clear()
        await view.extend(
            EntryItem(entry, chosen=entry.path == selected) for entry in entries
        )
        if entries:
            paths = [entry.path for entry in entries]
            view.index = paths.index(selected) if selected in paths else 0
        self.query_one("#entry-empty", Static).display = not entries

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        if isinstance(event.item, EntryItem):
            self.post_message(self.EntryChosen(event.item.entry))
