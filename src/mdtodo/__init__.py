"""mdtodo - todo lists kept as markdown checklists."""

__version__ = "1.0.0"

from .models import TodoItem, TodoItemState, PassthroughLine, DEFAULT_CONFIG_PATH
from .errors import TodoError, ParseError, ParseCause, InvalidItemNumber, FileIOError, ConfigError
from .markdown import parse_item, parse_document, to_markdown
from .core import TodoList, move_items
from .storage import read_list, write_list, move_between
from .display import render_item, render_list

__all__ = [
    "TodoItem",
    "TodoItemState",
    "PassthroughLine",
    "DEFAULT_CONFIG_PATH",
    "TodoError",
    "ParseError",
    "ParseCause",
    "InvalidItemNumber",
    "FileIOError",
    "ConfigError",
    "parse_item",
    "parse_document",
    "to_markdown",
    "TodoList",
    "move_items",
    "read_list",
    "write_list",
    "move_between",
    "render_item",
    "render_list",
]
