"""filechooser - a modal file/directory picker for Textual apps."""

from filechooser.config import ChooserOptions
from filechooser.core.navigation import ChooserResult, Navigator, SelectionMode
from filechooser.screens.file_chooser import FileChooserScreen

__all__ = [
    "ChooserOptions",
    "ChooserResult",
    "FileChooserScreen",
    "Navigator",
    "SelectionMode",
]
