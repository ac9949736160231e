"""Markdown-style formatting of the selected text in an editable buffer.

The module-level functions are pure: they take the buffer and the current
selection and return a `FormatResult`. `TextFormatter` binds them to an
editor control, pushes the new content through a setter and restores the
selection once the content has been applied.
"""

from typing import Any, Callable, Optional

from trackademic.editor.control import ContentUpdate, ControlRef
from trackademic.logging import get_logger
from trackademic.model.selection import FormatResult, Selection

DEFAULT_PLACEHOLDER = "text"
ORDERED_LIST_TOKEN = "1."


def _line_start(buffer: str, offset: int) -> int:
    return buffer.rfind("\n", 0, offset) + 1


def _line_end(buffer: str, offset: int) -> int:
    end = buffer.find("\n", offset)
    return len(buffer) if end == -1 else end


def wrap_selection(
    buffer: str,
    selection: Selection,
    prefix: str,
    suffix: Optional[str] = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> FormatResult:
    """
    Surround the selection with `prefix` and `suffix`.

    There is no toggle detection: wrapping `**x**` in bold again gives
    `****x****`. With a non-empty selection the new selection covers the
    whole inserted `prefix + selected + suffix` span. With an empty one the
    placeholder is inserted between the markers and selected on its own so
    it can be typed over.
    """
    if suffix is None:
        suffix = prefix
    start, end = selection.start, selection.end
    selected = buffer[start:end]
    inner = selected or placeholder

    content = f"{buffer[:start]}{prefix}{inner}{suffix}{buffer[end:]}"

    if selected:
        new_selection = Selection(start, start + len(prefix) + len(selected) + len(suffix))
    else:
        new_selection = Selection(start + len(prefix), start + len(prefix) + len(placeholder))
    return FormatResult(content, new_selection)


def prefix_line(
    buffer: str,
    selection: Selection,
    line_prefix: str,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> FormatResult:
    """
    Insert `line_prefix` at the start of the line holding the selection start.

    Only that first line is prefixed. On a non-empty line the text is left
    as is and the selection moves forward by `len(line_prefix)`; on an empty
    line the placeholder is inserted after the prefix and selected.
    """
    line_start = _line_start(buffer, selection.start)
    line_is_empty = _line_end(buffer, line_start) == line_start

    if line_is_empty:
        content = f"{buffer[:line_start]}{line_prefix}{placeholder}{buffer[line_start:]}"
        placeholder_start = line_start + len(line_prefix)
        return FormatResult(content, Selection(placeholder_start, placeholder_start + len(placeholder)))

    content = f"{buffer[:line_start]}{line_prefix}{buffer[line_start:]}"
    return FormatResult(content, selection.shifted(len(line_prefix)))


def is_ordered_marker(marker: str) -> bool:
    return marker.strip() == ORDERED_LIST_TOKEN


def prefix_lines(buffer: str, selection: Selection, marker: str) -> FormatResult:
    """
    Turn every line touched by the selection into a list item.

    A line is touched when its range intersects `[start, end]`, so the line
    holding `end` counts even when `end` sits right after a newline. The
    `"1."` marker numbers the lines `1. `, `2. `, ... in block order; any
    other marker is repeated on every line. The new selection spans the
    rewritten block, except for a lone empty line where the cursor is left
    right after the marker.
    """
    block_start = _line_start(buffer, selection.start)
    block_end = _line_end(buffer, selection.end)
    lines = buffer[block_start:block_end].split("\n")

    if is_ordered_marker(marker):
        items = [f"{number}. {line}" for number, line in enumerate(lines, start=1)]
    else:
        bullet = marker.rstrip()
        items = [f"{bullet} {line}" for line in lines]

    block = "\n".join(items)
    content = f"{buffer[:block_start]}{block}{buffer[block_end:]}"

    if lines == [""]:
        return FormatResult(content, Selection.cursor(block_start + len(block)))
    return FormatResult(content, Selection(block_start, block_start + len(block)))


def _run_now(callback: Callable[[], None]) -> None:
    callback()


class TextFormatter:
    """
    Applies formatting commands to an editor control.

    Args:
        control_ref: Holder of the control; commands are no-ops while
            `control_ref.current` is None.
        set_content: Setter receiving the new buffer (it may also accept an
            updater callable, the formatter always passes a string).
        schedule: Runs the selection restore callback once the new content
            is on the control, e.g. `loop.call_soon`. Defaults to running it
            right after `set_content` returns.
    """

    def __init__(
        self,
        control_ref: ControlRef,
        set_content: Callable[[ContentUpdate], Any],
        schedule: Optional[Callable[[Callable[[], None]], Any]] = None,
    ):
        self.control_ref = control_ref
        self.set_content = set_content
        self.schedule = schedule or _run_now
        self.logger = get_logger(self.__class__.__name__)

    def _current_selection(self) -> Optional[tuple]:
        control = self.control_ref.current
        if control is None:
            self.logger.debug("No editor control mounted, skipping formatting")
            return None
        value = control.value
        return value, Selection.clamped(control.selection_start, control.selection_end, len(value))

    def _commit(self, result: FormatResult) -> FormatResult:
        control = self.control_ref.current
        self.set_content(result.content)

        def restore_selection():
            control.focus()
            control.set_selection_range(result.selection.start, result.selection.end)

        # content first, selection second, or the update would overwrite it
        self.schedule(restore_selection)
        return result

    def apply_formatting(
        self,
        prefix: str,
        suffix: Optional[str] = None,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> Optional[FormatResult]:
        current = self._current_selection()
        if current is None:
            return None
        value, selection = current
        self.logger.debug(f"Wrapping selection {selection.start}-{selection.end} with {prefix!r}")
        return self._commit(wrap_selection(value, selection, prefix, suffix, placeholder))

    def apply_block_formatting(self, line_prefix: str, placeholder: str = DEFAULT_PLACEHOLDER) -> Optional[FormatResult]:
        current = self._current_selection()
        if current is None:
            return None
        value, selection = current
        self.logger.debug(f"Prefixing line at {selection.start} with {line_prefix!r}")
        return self._commit(prefix_line(value, selection, line_prefix, placeholder))

    def apply_list_formatting(self, marker: str) -> Optional[FormatResult]:
        current = self._current_selection()
        if current is None:
            return None
        value, selection = current
        self.logger.debug(f"Applying list marker {marker!r} to {selection.start}-{selection.end}")
        return self._commit(prefix_lines(value, selection, marker))
