"""Reading and writing the markdown checklist format.

One element per line. A line is a checklist item only if it reads exactly
``- [<mark>] <title>`` with mark ``x`` or a space; every other line is kept as
a passthrough line so that headings, notes and broken items survive a
rewrite unchanged.
"""

import logging
from typing import List

from .errors import ParseCause, ParseError
from .models import ITEM_PREFIX, Element, PassthroughLine, TodoItem, TodoItemState

logger = logging.getLogger(__name__)


def parse_item(line: str) -> TodoItem:
    """Parse one checklist line, raising ParseError with the failing cause."""
    if not line.startswith(ITEM_PREFIX):
        raise ParseError(ParseCause.MISSING_PREFIX, line)
    pos = len(ITEM_PREFIX)

    if pos >= len(line):
        raise ParseError(ParseCause.MISSING_MARK, line)
    state = TodoItemState.from_mark(line[pos])
    if state is None:
        raise ParseError(ParseCause.INVALID_MARK, line)
    pos += 1

    if pos >= len(line) or line[pos] != "]":
        raise ParseError(ParseCause.MISSING_BRACKET, line)
    pos += 1

    if pos >= len(line):
        raise ParseError(ParseCause.EMPTY_TITLE, line)
    if line[pos] != " ":
        raise ParseError(ParseCause.MISSING_SPACE, line)
    pos += 1

    name = line[pos:]
    if not name.strip():
        raise ParseError(ParseCause.EMPTY_TITLE, line)
    return TodoItem(name=name, state=state)


def classify_line(line: str) -> Element:
    """Return a TodoItem for a valid checklist line, else a PassthroughLine."""
    if not line.startswith(ITEM_PREFIX):
        return PassthroughLine(line)
    try:
        return parse_item(line)
    except ParseError as e:
        logger.debug("Keeping malformed item as plain text (%s): %r", e.cause.name, line)
        return PassthroughLine(line)


def split_lines(text: str) -> List[str]:
    """Split a document into lines, dropping one trailing newline."""
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def parse_document(text: str) -> List[Element]:
    return [classify_line(line) for line in split_lines(text)]


def format_item(item: TodoItem) -> str:
    return f"- [{item.state.as_markdown()}] {item.name}"


def to_markdown(elements: List[Element]) -> str:
    """Serialize elements back to file text, ending with a single newline."""
    if not elements:
        return ""
    lines = [
        format_item(el) if isinstance(el, TodoItem) else el.text
        for el in elements
    ]
    return "\n".join(lines) + "\n"
