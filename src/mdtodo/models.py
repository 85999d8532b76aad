"""Data models and constants for mdtodo."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

DEFAULT_DIR = os.path.expanduser("~/.mdtodo")
DEFAULT_CONFIG_PATH = os.path.join(DEFAULT_DIR, "config.yaml")
DEFAULT_MAIN_DIR = os.path.join(DEFAULT_DIR, "lists")
DEFAULT_GENERAL_LIST = "general"
LOCAL_LIST_FILE = "todo.md"
LIST_SUFFIX = ".md"

ITEM_PREFIX = "- ["


class TodoItemState(Enum):
    """Completion state of a checklist item."""

    DONE = "done"
    INITIAL = "initial"

    def as_markdown(self) -> str:
        return "x" if self is TodoItemState.DONE else " "

    @classmethod
    def from_mark(cls, mark: str) -> Optional["TodoItemState"]:
        """Map a checkbox mark to a state, None if the mark is unsupported."""
        if mark == "x":
            return cls.DONE
        if mark == " ":
            return cls.INITIAL
        return None


@dataclass
class TodoItem:
    """A single checklist item."""

    name: str
    state: TodoItemState = TodoItemState.INITIAL
    description: Optional[str] = None

    @property
    def is_done(self) -> bool:
        return self.state is TodoItemState.DONE

    def mark_done(self) -> None:
        self.state = TodoItemState.DONE


@dataclass
class PassthroughLine:
    """Any line that is not a checklist item, kept verbatim."""

    text: str


Element = Union[TodoItem, PassthroughLine]
