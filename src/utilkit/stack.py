# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Last-in-first-out container with guarded operations.

The stack is backed by a Python list whose end is the top, so push, pop and
peek are amortized O(1). Operations that need a top element raise
EmptyContainerError on an empty stack instead of returning a sentinel.

Thread Safety:
    None. A stack instance is expected to have a single owner.
"""

import logging
from typing import Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EmptyContainerError(IndexError):
    """Raised when pop or peek is invoked on an empty stack."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} from empty stack")


class Stack(Generic[T]):
    """Generic LIFO stack.

    Usage:
        stack: Stack[int] = Stack()
        stack.push(1)
        stack.push(2)
        stack.pop()  # 2
        stack.peek()  # 1
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        """Add item as the new top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyContainerError: If the stack is empty.
        """
        if not self._items:
            logger.debug("pop called on empty stack")
            raise EmptyContainerError("pop")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyContainerError: If the stack is empty.
        """
        if not self._items:
            logger.debug("peek called on empty stack")
            raise EmptyContainerError("peek")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove all items. Safe to call on an empty stack."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
