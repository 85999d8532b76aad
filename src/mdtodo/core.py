"""The todo list model (pure, no I/O).

Item numbers are 1-based and count checklist items only; passthrough lines
never take a number. Batch operations validate every number before touching
the list, so a bad number leaves the list exactly as it was.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidItemNumber, ParseCause, ParseError
from .markdown import parse_document, to_markdown
from .models import Element, TodoItem, TodoItemState

logger = logging.getLogger(__name__)


def validate_title(title: str) -> None:
    """Reject titles that could not be written back as a single item line."""
    if not title.strip():
        raise ParseError(ParseCause.EMPTY_TITLE, title)
    if "\n" in title or "\r" in title:
        raise ParseError(ParseCause.MULTILINE_TITLE, title)


class TodoList:
    """An ordered sequence of checklist items and passthrough lines."""

    def __init__(self, name: str, elements: Optional[List[Element]] = None):
        self.name = name
        self.elements: List[Element] = elements if elements is not None else []

    @classmethod
    def from_text(cls, name: str, text: str) -> "TodoList":
        return cls(name, parse_document(text))

    def as_markdown(self) -> str:
        return to_markdown(self.elements)

    @property
    def items(self) -> List[TodoItem]:
        return [el for el in self.elements if isinstance(el, TodoItem)]

    def __len__(self) -> int:
        return len(self.items)

    def numbered(self) -> Iterator[Tuple[int, TodoItem]]:
        """Yield (number, item) pairs in file order."""
        return enumerate(self.items, start=1)

    def _positions(self) -> List[int]:
        return [i for i, el in enumerate(self.elements) if isinstance(el, TodoItem)]

    def _resolve(self, numbers: Iterable[int]) -> List[int]:
        """Map item numbers to element positions; fail on the first bad number."""
        positions = self._positions()
        resolved = []
        for n in numbers:
            if n < 1 or n > len(positions):
                raise InvalidItemNumber(n, self.name)
            resolved.append(positions[n - 1])
        return resolved

    def get_item(self, number: int) -> TodoItem:
        (pos,) = self._resolve([number])
        return self.elements[pos]

    def add_item(self, title: str, description: Optional[str] = None) -> TodoItem:
        validate_title(title)
        item = TodoItem(name=title, state=TodoItemState.INITIAL, description=description)
        self.elements.append(item)
        return item

    def add_items(self, items: Iterable[TodoItem]) -> None:
        self.elements.extend(items)

    def mark_done(self, numbers: Sequence[int]) -> List[TodoItem]:
        """Mark items done, returning them in the order requested."""
        items = [self.elements[pos] for pos in self._resolve(numbers)]
        for item in items:
            item.mark_done()
        return items

    def delete(self, numbers: Sequence[int]) -> List[TodoItem]:
        """Remove items, returning them from the highest number down.

        Duplicate numbers remove an item once.
        """
        positions = sorted(set(self._resolve(numbers)), reverse=True)
        removed = [self.elements.pop(pos) for pos in positions]
        logger.debug("Removed %d item(s) from %s", len(removed), self.name)
        return removed

    def edit(self, number: int, title: str) -> TodoItem:
        validate_title(title)
        item = self.get_item(number)
        item.name = title
        return item

    def clean(self) -> List[TodoItem]:
        """Remove all done items, returning them in file order."""
        done = [el for el in self.elements if isinstance(el, TodoItem) and el.is_done]
        self.elements = [
            el for el in self.elements if not (isinstance(el, TodoItem) and el.is_done)
        ]
        return done


def move_items(
    source: TodoList, numbers: Sequence[int], destination: TodoList
) -> List[TodoItem]:
    """Delete items from source and append them to destination.

    Items keep their state and description and arrive in their source order.
    """
    removed = source.delete(numbers)
    moved = list(reversed(removed))
    destination.add_items(moved)
    return moved
