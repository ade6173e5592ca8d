from typing import Any, Callable, Iterable, Iterator, List, Optional

class EmptyStackError(IndexError):
    """Raised when an element is requested from an empty stack"""
    pass

class Stack:
    """
    Last-in-first-out container backed by a private list.
    The end of the list is the top of the stack.
    Not safe for use from several threads without external locking.
    """
    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items: List[Any] = []
        if items is not None:
            for item in items:
                self.push(item)

    def push(self, item: Any) -> None:
        # Add an item to the top of the stack
        self._items.append(item)

    def pop(self) -> Any:
        # Remove and return the top item from the stack
        if self.is_empty():
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        # Return the top item without removing it
        if self.is_empty():
            raise EmptyStackError("peek from empty stack")
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def clear(self) -> None:
        self._items = []

    def contains(self, item: Any, eq: Optional[Callable[[Any, Any], bool]] = None) -> bool:
        """
        Check whether an element equal to item is on the stack.
        eq(element, item) replaces the == comparison when given.
        """
        if eq is None:
            return item in self._items
        return any(eq(element, item) for element in self._items)

    def reverse(self) -> None:
        # Former bottom becomes the new top
        self._items.reverse()

    def render(self) -> str:
        """Elements from bottom to top, each followed by a space"""
        return ''.join(f"{item} " for item in self._items)

    def to_list(self) -> List[Any]:
        # Copy, bottom first
        return list(self._items)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Stack({self._items})"
