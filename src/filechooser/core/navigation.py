"""Navigator - the chooser's navigation and selection state machine."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Callable, NamedTuple

if TYPE_CHECKING:
    from filechooser.core.lister import Entry

logger = logging.getLogger(__name__)


def _working_directory() -> Path | None:
    """The process working directory, or None when it no longer exists."""
    try:
        return Path.cwd()
    except OSError as e:
        logger.debug("Working directory unavailable: %s", e)
        return None


def _initial_directory() -> Path:
    return _working_directory() or Path.home()


class SelectionMode(enum.Enum):
    DIRECTORY_ONLY = "directory_only"
    FILE_OR_DIRECTORY = "file_or_directory"

    @classmethod
    def from_only_directories(cls, only_directories: bool) -> SelectionMode:
        return cls.DIRECTORY_ONLY if only_directories else cls.FILE_OR_DIRECTORY


class ChooserResult(NamedTuple):
    """What the chooser hands back to its host when it closes."""
    path: Path | None
    accepted: bool


@dataclass(frozen=True)
class NavigationState:
    """Snapshot of the chooser. Replaced, never mutated, on every transition."""

    current_path: Path = field(default_factory=_initial_directory)
    first_load: bool = True
    selection_mode: SelectionMode = SelectionMode.FILE_OR_DIRECTORY
    selected_entry: Path | None = None
    generation: int = 0


Listener = Callable[[NavigationState], None]


class Navigator:
    """Holds the chooser state and applies transitions to it.

    Every transition that actually changes the state notifies subscribers with
    the new snapshot. Invalid requests are ignored: nothing here raises.
    """

    def __init__(self, state: NavigationState | None = None) -> None:
        self._state = state if state is not None else NavigationState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def generation(self) -> int:
        return self._state.generation

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # === Transitions ===

    def set_selection_mode(self, only_directories: bool) -> None:
        self._update(selection_mode=SelectionMode.from_only_directories(only_directories))

    def navigate_to(self, path: str | os.PathLike) -> bool:
        """Make ``path`` the current directory.

        Returns False, leaving the state untouched, when ``path`` is not an
        existing directory.
        """
        candidate = Path(path)
        if not candidate.is_dir():
            logger.debug("Ignoring navigation to %s: not a directory", candidate)
            return False
        try:
            target = Path(os.path.abspath(candidate))
        except OSError as e:
            logger.debug("Ignoring navigation to %s: %s", candidate, e)
            return False
        self._update(
            current_path=target,
            selected_entry=None,
            first_load=False,
            generation=self._state.generation + 1,
        )
        return True

    def apply_base_directory_once(self, path: str | os.PathLike | None) -> bool:
        """Seed the current directory from the host, until it has taken once."""
        if not self._state.first_load or path is None:
            return False
        return self.navigate_to(path)

    def select(self, entry: Entry | str | os.PathLike | None) -> None:
        if entry is None:
            self._update(selected_entry=None)
            return
        self._update(selected_entry=Path(getattr(entry, "path", entry)))

    def navigate_home(self) -> bool:
        home = _working_directory()
        if home is None:
            return False
        return self.navigate_to(home)

    def navigate_to_parent(self) -> bool:
        current = self._state.current_path
        if current.name == "":
            return False
        return self.navigate_to(current.parent)

    # === Results ===

    def resolve_accept(self) -> ChooserResult | None:
        """Result of pressing accept, or None when there is nothing to accept."""
        state = self._state
        if state.selection_mode is SelectionMode.DIRECTORY_ONLY:
            return ChooserResult(state.current_path, True)
        if state.selected_entry is not None:
            return ChooserResult(state.selected_entry, True)
        return None

    @staticmethod
    def resolve_cancel() -> ChooserResult:
        return ChooserResult(None, False)
