"""A minimal singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """Singly linked list that grows at the front."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None

    def insert_front(self, data: T) -> None:
        self._head = _Node(data, self._head)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def find(self, value: Any) -> Optional[T]:
        """Return the first stored item equal to value, or None."""
        return next((item for item in self if item == value), None)


def main(argv: Optional[list[str]] = None) -> int:
    items: LinkedList[int] = LinkedList()
    for value in (3, 5, 7, 9):
        items.insert_front(value)
    target = int(argv[0]) if argv else 13
    found = items.find(target)
    print(found if found is not None else "Not found")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())