"""Tests for the TextFormatter facade, editor control and toolbar."""

from unittest.mock import Mock

import pytest

from trackademic.editor.control import ControlRef, TextArea
from trackademic.editor.formatter import TextFormatter
from trackademic.editor.toolbar import TOOLBAR_ITEMS, build_toolbar, get_command, run_command
from trackademic.errors import UnknownCommandError
from trackademic.model.selection import Selection


class RecordingTextArea(TextArea):
    """TextArea that records the order of the calls it receives."""

    def __init__(self, *args, **kwargs):
        self.events = []
        super().__init__(*args, **kwargs)

    def set_content(self, update):
        self.events.append("set_content")
        super().set_content(update)

    def focus(self):
        self.events.append("focus")
        super().focus()

    def set_selection_range(self, start, end):
        self.events.append(("select", start, end))
        super().set_selection_range(start, end)


class TestTextArea:
    """Test suite for the in-memory control."""

    def test_set_content_accepts_updater(self):
        text_area = TextArea("abc")
        text_area.set_content(lambda prev: prev + "!")
        assert text_area.value == "abc!"

    def test_set_content_collapses_selection_to_end(self):
        text_area = TextArea("abc", 0, 3)
        text_area.set_content("hello")
        assert (text_area.selection_start, text_area.selection_end) == (5, 5)

    def test_selection_range_is_clamped(self):
        text_area = TextArea("abc")
        text_area.set_selection_range(-2, 10)
        assert (text_area.selection_start, text_area.selection_end) == (0, 3)

    def test_reversed_range_collapses_like_clamped_selection(self):
        text_area = TextArea("abcdefghij")
        text_area.set_selection_range(7, 2)

        assert (text_area.selection_start, text_area.selection_end) == (2, 2)
        assert Selection.clamped(7, 2, 10) == Selection(text_area.selection_start, text_area.selection_end)


class TestTextFormatter:
    """Test suite for the stateful formatter."""

    def test_apply_formatting_updates_control(self):
        text_area = TextArea("hello world", 6, 11)
        formatter = TextFormatter(ControlRef(text_area), text_area.set_content)

        formatter.apply_formatting("**")

        assert text_area.value == "hello **world**"
        assert (text_area.selection_start, text_area.selection_end) == (6, 15)
        assert text_area.focused

    def test_apply_formatting_empty_selection(self, text_area, formatter):
        formatter.apply_formatting("**")

        assert text_area.value == "**text**"
        assert text_area.selected_text == "text"

    def test_apply_block_formatting(self, text_area, formatter):
        formatter.apply_block_formatting("# ", "Heading 1")

        assert text_area.value == "# Heading 1"
        assert text_area.selected_text == "Heading 1"

    def test_apply_list_formatting(self):
        text_area = TextArea("a\nb\nc", 0, 5)
        formatter = TextFormatter(ControlRef(text_area), text_area.set_content)

        result = formatter.apply_list_formatting("1.")

        assert text_area.value == "1. a\n2. b\n3. c"
        assert text_area.selected_text == text_area.value
        assert result.content == text_area.value

    def test_content_update_happens_before_selection_restore(self):
        text_area = RecordingTextArea("hello", 0, 5)
        formatter = TextFormatter(ControlRef(text_area), text_area.set_content)

        formatter.apply_formatting("*")

        assert text_area.events[-3:] == ["set_content", "focus", ("select", 0, 7)]

    def test_selection_restore_waits_for_scheduler(self):
        text_area = TextArea("hello", 0, 5)
        pending = []
        formatter = TextFormatter(ControlRef(text_area), text_area.set_content, schedule=pending.append)

        formatter.apply_formatting("**")

        assert text_area.value == "**hello**"
        assert not text_area.focused
        assert len(pending) == 1

        pending.pop()()

        assert text_area.focused
        assert text_area.selected_text == "**hello**"

    def test_out_of_range_control_selection_is_clamped(self):
        text_area = TextArea("abc")
        text_area.selection_start = text_area.selection_end = 100
        formatter = TextFormatter(ControlRef(text_area), text_area.set_content)

        formatter.apply_formatting("**")

        assert text_area.value == "abc**text**"
        assert text_area.selected_text == "text"

    @pytest.mark.parametrize("command", [
        lambda f: f.apply_formatting("**"),
        lambda f: f.apply_block_formatting("# ", "Heading 1"),
        lambda f: f.apply_list_formatting("*"),
    ])
    def test_unmounted_control_is_a_noop(self, command):
        set_content = Mock()
        formatter = TextFormatter(ControlRef(), set_content)

        assert command(formatter) is None
        set_content.assert_not_called()

    def test_external_setter_receives_new_string(self):
        text_area = TextArea("x", 0, 1)
        set_content = Mock(side_effect=text_area.set_content)
        formatter = TextFormatter(ControlRef(text_area), set_content)

        formatter.apply_formatting("`")

        set_content.assert_called_once_with("`x`")


class TestToolbar:
    """Test suite for the toolbar command table."""

    def test_toolbar_order(self):
        assert [item.name for item in TOOLBAR_ITEMS] == [
            "Bold", "Italic", "Strikethrough", "Heading 1", "Heading 2", "Heading 3",
            "Blockquote", "Code", "Bulleted List", "Numbered List", "Link",
        ]

    @pytest.mark.parametrize("slug,expected,selected", [
        ("bold", "**text**", "text"),
        ("italic", "*text*", "text"),
        ("strikethrough", "~~text~~", "text"),
        ("heading2", "## Heading 2", "Heading 2"),
        ("heading3", "### Heading 3", "Heading 3"),
        ("blockquote", "> Quote", "Quote"),
        ("code", "`text`", "text"),
        ("link", "[link text](url)", "link text"),
    ])
    def test_commands_on_empty_editor(self, text_area, formatter, slug, expected, selected):
        run_command(formatter, slug)

        assert text_area.value == expected
        assert text_area.selected_text == selected

    def test_list_commands(self):
        text_area = TextArea("milk\neggs", 0, 9)
        formatter = TextFormatter(ControlRef(text_area), text_area.set_content)

        run_command(formatter, "bulleted_list")
        assert text_area.value == "* milk\n* eggs"

        run_command(formatter, "numbered_list")
        assert text_area.value == "1. * milk\n2. * eggs"

    def test_unknown_command(self, formatter):
        with pytest.raises(UnknownCommandError):
            run_command(formatter, "underline")

    def test_get_command(self):
        assert get_command("heading1").name == "Heading 1"

    def test_build_toolbar(self, text_area, formatter):
        toolbar = build_toolbar(formatter)

        assert set(toolbar) == {item.name for item in TOOLBAR_ITEMS}
        toolbar["Link"]()
        assert text_area.value == "[link text](url)"
