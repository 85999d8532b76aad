"""Exceptions raised by the list model, storage and config layers."""

from enum import Enum
from typing import Optional


class ParseCause(Enum):
    """Why a line could not be read as a checklist item."""

    MISSING_PREFIX = "Item should start with the check box"
    MISSING_MARK = "Item should start with the check box. No mark"
    INVALID_MARK = "This state of a todo item is not supported"
    MISSING_BRACKET = "Item should start with the check box. Expected ']'"
    MISSING_SPACE = "Space expected after ']'"
    EMPTY_TITLE = "Item name can't be empty"
    MULTILINE_TITLE = "Item name must fit on a single line"


class TodoError(Exception):
    """Base class for every mdtodo error."""


class ParseError(TodoError):
    def __init__(self, cause: ParseCause, line: str):
        self.cause = cause
        self.line = line
        super().__init__(f"Parsing error. {cause.value}.\nFound: '{line}'")


class InvalidItemNumber(TodoError):
    def __init__(self, number: int, list_name: Optional[str] = None):
        self.number = number
        self.list_name = list_name
        where = f"the list '{list_name}'" if list_name else "the list"
        super().__init__(
            f"Invalid item number. The item number {number} doesn't exist in {where}"
        )


class FileIOError(TodoError):
    """Wraps an OSError or decoding error raised for a list file."""

    def __init__(self, path: str, error: Exception):
        self.path = path
        self.error = error
        if isinstance(error, UnicodeDecodeError):
            reason = "Not valid UTF-8 text"
        else:
            reason = getattr(error, "strerror", None) or str(error)
        super().__init__(f"IO Error. {reason}: '{path}'")

    @property
    def not_found(self) -> bool:
        return isinstance(self.error, FileNotFoundError)


class ConfigError(TodoError):
    def __init__(self, path: str, message: str, action: str = "read"):
        self.path = path
        super().__init__(f"Couldn't {action} the config at '{path}': {message}")
