"""Human-readable rendering of todo lists as rich Text."""

import re
from typing import Callable, Optional, Tuple

from rich.text import Text

from .core import TodoList
from .models import PassthroughLine, TodoItem, TodoItemState

Predicate = Callable[[Tuple[int, TodoItem]], bool]

STATE_GLYPHS = {
    TodoItemState.DONE: ("✅", "green"),
    TodoItemState.INITIAL: ("⬜", "yellow"),
}
TAG_STYLE = "black on yellow"
DONE_STYLE = "strike"

# "#" directly followed by non-whitespace; "# 3" is not a tag
TAG_RE = re.compile(r"#\S+")


def show_all(entry: Tuple[int, TodoItem]) -> bool:
    return True


def show_pending(entry: Tuple[int, TodoItem]) -> bool:
    return not entry[1].is_done


def show_done(entry: Tuple[int, TodoItem]) -> bool:
    return entry[1].is_done


def highlight_tags(text: str) -> Text:
    """Return text with every #tag styled."""
    rendered = Text(text)
    rendered.highlight_regex(TAG_RE, style=TAG_STYLE)
    return rendered


def render_item(number: int, item: TodoItem) -> Text:
    """Render one item as '  N <glyph> title', description on the next line."""
    glyph, glyph_style = STATE_GLYPHS[item.state]
    title = highlight_tags(item.name)
    if item.is_done:
        title.stylize(DONE_STYLE)

    line = Text(f"{number:>3} ")
    line.append(glyph, style=glyph_style)
    line.append(" ")
    line.append_text(title)
    if item.description:
        line.append("\n")
        line.append_text(highlight_tags(item.description))
    return line


def render_list(
    todo_list: TodoList,
    predicate: Optional[Predicate] = None,
    items_only: bool = False,
) -> Text:
    """Render the list with item numbers taken from the unfiltered list.

    Passthrough lines are never filtered; they are shown in place unless
    items_only is set, in which case they are left out.
    """
    predicate = predicate or show_all
    lines = []
    number = 0
    for el in todo_list.elements:
        if isinstance(el, PassthroughLine):
            if not items_only:
                lines.append(Text(el.text))
            continue
        number += 1
        if predicate((number, el)):
            lines.append(render_item(number, el))
    return Text("\n").join(lines)
