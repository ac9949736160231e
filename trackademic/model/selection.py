"""Selection and formatting result values used by the text formatter."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Selection:
    """
    A pair of character offsets delimiting highlighted text in a buffer.

    Offsets satisfy `0 <= start <= end <= len(buffer)`; an empty selection
    (`start == end`) is a plain cursor.
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid selection range: ({self.start}, {self.end})")

    @classmethod
    def clamped(cls, start: int, end: int, length: int) -> "Selection":
        """Build a selection forced into `[0, length]`.

        Like a browser textarea, a `start` past `end` collapses onto `end`.
        """
        end = min(max(end, 0), length)
        start = min(max(start, 0), end)
        return cls(start, end)

    @classmethod
    def cursor(cls, position: int) -> "Selection":
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def shifted(self, offset: int) -> "Selection":
        return Selection(self.start + offset, self.end + offset)

    def text(self, buffer: str) -> str:
        """Get the selected substring of `buffer`."""
        return buffer[self.start:self.end]


@dataclass(frozen=True)
class FormatResult:
    """New buffer content and the selection to restore after formatting."""

    content: str
    selection: Selection

    @property
    def selected_text(self) -> str:
        return self.selection.text(self.content)
