"""Toolbar commands of the note editor, in display order."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from trackademic.editor.formatter import TextFormatter
from trackademic.errors import UnknownCommandError
from trackademic.model.selection import FormatResult


@dataclass(frozen=True)
class ToolbarItem:
    name: str  # label shown on the button tooltip
    slug: str  # identifier used by the CLI and keyboard bindings
    action: Callable[[TextFormatter], Optional[FormatResult]]


TOOLBAR_ITEMS: List[ToolbarItem] = [
    ToolbarItem("Bold", "bold", lambda f: f.apply_formatting("**")),
    ToolbarItem("Italic", "italic", lambda f: f.apply_formatting("*")),
    ToolbarItem("Strikethrough", "strikethrough", lambda f: f.apply_formatting("~~")),
    ToolbarItem("Heading 1", "heading1", lambda f: f.apply_block_formatting("# ", "Heading 1")),
    ToolbarItem("Heading 2", "heading2", lambda f: f.apply_block_formatting("## ", "Heading 2")),
    ToolbarItem("Heading 3", "heading3", lambda f: f.apply_block_formatting("### ", "Heading 3")),
    ToolbarItem("Blockquote", "blockquote", lambda f: f.apply_block_formatting("> ", "Quote")),
    ToolbarItem("Code", "code", lambda f: f.apply_formatting("`")),
    ToolbarItem("Bulleted List", "bulleted_list", lambda f: f.apply_list_formatting("*")),
    ToolbarItem("Numbered List", "numbered_list", lambda f: f.apply_list_formatting("1.")),
    ToolbarItem("Link", "link", lambda f: f.apply_formatting("[", "](url)", "link text")),
]

COMMANDS: Dict[str, ToolbarItem] = {item.slug: item for item in TOOLBAR_ITEMS}


def get_command(slug: str) -> ToolbarItem:
    try:
        return COMMANDS[slug]
    except KeyError:
        raise UnknownCommandError(f"Unknown command: {slug}. Allowed: {sorted(COMMANDS)}") from None


def run_command(formatter: TextFormatter, slug: str) -> Optional[FormatResult]:
    """Run the toolbar command registered under `slug` on `formatter`."""
    return get_command(slug).action(formatter)


def build_toolbar(formatter: TextFormatter) -> Dict[str, Callable[[], Optional[FormatResult]]]:
    """Bind every toolbar item to `formatter`, keyed by button label."""
    return {item.name: (lambda item=item: item.action(formatter)) for item in TOOLBAR_ITEMS}
