"""ChooserOptions - host-supplied configuration for the chooser screen."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


@dataclass(frozen=True)
class ChooserOptions:
    """Everything the host decides about the chooser.

    The screen re-applies these whenever they change, so a host can flip
    ``only_directories`` or relabel the buttons while the dialog is open.
    """

    visible: bool = True
    only_directories: bool = False
    base_directory: Path | None = None
    title: str = "Choose a file"
    accept_title: str = "Accept"
    cancel_title: str = "Cancel"
    show_hidden: bool = True

    @classmethod
    def from_env(cls) -> ChooserOptions:
        """Defaults taken from FILECHOOSER_* environment variables."""
        base = os.environ.get("FILECHOOSER_BASE_DIR")
        return cls(
            only_directories=_env_flag("FILECHOOSER_ONLY_DIRS", False),
            base_directory=Path(base).expanduser() if base else None,
            show_hidden=_env_flag("FILECHOOSER_SHOW_HIDDEN", True),
        )
