"""One-level directory listing filtered by selection mode."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from filechooser.core.navigation import SelectionMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """A single child of the directory being browsed."""
    name: str
    is_directory: bool
    path: Path


def _is_directory(item: os.DirEntry) -> bool:
    try:
        return item.is_dir()
    except OSError:
        return False


def _sort_key(entry: Entry) -> tuple[bool, str, str]:
    return (not entry.is_directory, entry.name.casefold(), entry.name)


def list_entries(
    directory: str | os.PathLike,
    selection_mode: SelectionMode,
    show_hidden: bool = True,
) -> list[Entry]:
    """List the immediate children of ``directory``.

    Directories come first, then everything sorted by case-insensitive name.
    In ``DIRECTORY_ONLY`` mode files are left out. A directory that cannot be
    read yields an empty list.
    """
    only_directories = selection_mode is SelectionMode.DIRECTORY_ONLY
    entries: list[Entry] = []
    try:
        base = Path(os.path.abspath(directory))
        with os.scandir(directory) as it:
            for item in it:
                if not show_hidden and item.name.startswith("."):
                    continue
                is_dir = _is_directory(item)
                if only_directories and not is_dir:
                    continue
                entries.append(Entry(item.name, is_dir, base / item.name))
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return []

    entries.sort(key=_sort_key)
    return entries
