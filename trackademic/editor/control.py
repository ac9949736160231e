"""Editor control interface and an in-memory text area implementation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Union

from trackademic.model.selection import Selection

ContentUpdate = Union[str, Callable[[str], str]]


class EditorControl(ABC):
    """
    The part of an editable text control the formatter relies on.

    Implementations expose the current `value`, the native selection
    offsets, and the two calls used to restore the editing context.
    """

    value: str
    selection_start: int
    selection_end: int

    @abstractmethod
    def focus(self) -> None:
        pass

    @abstractmethod
    def set_selection_range(self, start: int, end: int) -> None:
        pass


@dataclass
class ControlRef:
    """Mutable holder for a control that may not be mounted yet."""

    current: Optional[EditorControl] = None


class TextArea(EditorControl):
    """In-memory text control, used by the CLI and in tests."""

    def __init__(self, value: str = "", selection_start: int = 0, selection_end: Optional[int] = None):
        self.value = value
        self.focused = False
        self.selection_start = 0
        self.selection_end = 0
        self.set_selection_range(selection_start, selection_start if selection_end is None else selection_end)

    def set_content(self, update: ContentUpdate) -> None:
        """Replace the value with a string or with `update(previous_value)`."""
        self.value = update(self.value) if callable(update) else update
        # replacing the value collapses the selection to the end, like a browser textarea
        self.selection_start = self.selection_end = len(self.value)

    def focus(self) -> None:
        self.focused = True

    def set_selection_range(self, start: int, end: int) -> None:
        selection = Selection.clamped(start, end, len(self.value))
        self.selection_start = selection.start
        self.selection_end = selection.end

    @property
    def selected_text(self) -> str:
        return self.value[self.selection_start:self.selection_end]

    def __repr__(self) -> str:
        return f"TextArea(len={len(self.value)}, selection=({self.selection_start}, {self.selection_end}))"
