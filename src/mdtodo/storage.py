"""File I/O for todo lists."""

import logging
import os
from typing import List, Optional, Sequence

from .core import TodoList, move_items
from .errors import FileIOError
from .models import LIST_SUFFIX, TodoItem

logger = logging.getLogger(__name__)


def list_name_from_path(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


def read_list(path: str, name: Optional[str] = None, missing_ok: bool = False) -> TodoList:
    """Load a list file.

    A missing file gives an empty list when missing_ok is set (the caller is
    about to create it); otherwise it is an error like any other OSError.
    """
    name = name or list_name_from_path(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        if missing_ok:
            logger.debug("No list at %s, starting a new one", path)
            return TodoList(name)
        raise FileIOError(path, e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(path, e) from e

    logger.debug("Read %d bytes from %s", len(text), path)
    return TodoList.from_text(name, text)


def write_list(path: str, todo_list: TodoList) -> None:
    """Rewrite the whole file from in-memory state."""
    try:
        ensure_dir_exists(os.path.dirname(os.path.abspath(path)))
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(todo_list.as_markdown())
    except OSError as e:
        raise FileIOError(path, e) from e
    logger.debug("Wrote %d item(s) to %s", len(todo_list), path)


def move_between(
    source_path: str,
    dest_path: str,
    numbers: Sequence[int],
    source_name: Optional[str] = None,
    dest_name: Optional[str] = None,
) -> List[TodoItem]:
    """Move items from one list file to another.

    The destination is written before the source: if the second write fails
    the items end up in both lists instead of neither.
    """
    source = read_list(source_path, source_name)

    if os.path.abspath(source_path) == os.path.abspath(dest_path):
        moved = move_items(source, numbers, source)
        write_list(source_path, source)
        return moved

    dest = read_list(dest_path, dest_name, missing_ok=True)
    moved = move_items(source, numbers, dest)
    write_list(dest_path, dest)
    write_list(source_path, source)
    logger.debug("Moved %d item(s) from %s to %s", len(moved), source_path, dest_path)
    return moved


def ensure_dir_exists(directory: str) -> None:
    os.makedirs(directory, exist_ok=True)


def get_available_lists(directory: str) -> List[str]:
    """Return sorted list names (without suffix) found in directory."""
    if not os.path.isdir(directory):
        return []
    return sorted(
        f[: -len(LIST_SUFFIX)]
        for f in os.listdir(directory)
        if f.endswith(LIST_SUFFIX) and os.path.isfile(os.path.join(directory, f))
    )
