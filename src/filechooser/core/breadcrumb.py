"""Labels for the current-path row shown above the listing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class Breadcrumb:
    parent_label: str
    current_label: str

    @property
    def can_go_up(self) -> bool:
        # A root has no name, and no ".." either.
        return self.current_label != ""


def breadcrumb_for(path: PurePath) -> Breadcrumb:
    """Derive the parent and current labels for ``path``.

    Roots (``/``, ``C:\\``, ``\\\\server\\share\\``) have an empty name. When
    the parent is a root its full path is used as the label instead.
    """
    parent = path.parent
    parent_label = parent.name or str(parent)
    return Breadcrumb(parent_label=parent_label, current_label=path.name)
