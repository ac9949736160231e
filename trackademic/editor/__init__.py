from trackademic.editor.control import ControlRef, EditorControl, TextArea
from trackademic.editor.formatter import TextFormatter, prefix_line, prefix_lines, wrap_selection
from trackademic.editor.toolbar import TOOLBAR_ITEMS, run_command

__all__ = [
    "ControlRef",
    "EditorControl",
    "TextArea",
    "TextFormatter",
    "prefix_line",
    "prefix_lines",
    "wrap_selection",
    "TOOLBAR_ITEMS",
    "run_command",
]
