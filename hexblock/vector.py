"""Growable containers with explicit capacity management."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class Vector:
    """A random-access container that tracks its reserved capacity.

    Capacity is rounded up to a multiple of ``grow_by`` whenever it grows.
    Single-element appends double the capacity, starting at four slots.
    """

    fill_value: Any = 0
    _initial_add_capacity = 4

    def __init__(self, grow_by: int = 1) -> None:
        if grow_by < 1:
            raise ValueError("grow_by must be at least 1")
        self._grow_by = grow_by
        self._items: list[Any] = []
        self._capacity = 0

    def add(self, value: Any) -> None:
        """Append one element."""
        if len(self._items) >= self._capacity:
            self.reserve(self._capacity * 2 if self._capacity else self._initial_add_capacity)
        self._items.append(value)

    def extend(self, values: Iterable[Any]) -> None:
        """Append several elements."""
        values = list(values)
        needed = len(self._items) + len(values)
        if self._capacity < needed:
            capacity = self._capacity
            if capacity == 0:
                capacity = needed
            else:
                while capacity < needed:
                    capacity *= 2
            self.reserve(capacity)
        self._items.extend(values)

    def remove(self, index: int, number: int = 1) -> None:
        """Remove ``number`` elements starting at ``index``."""
        if number < 0:
            raise ValueError("number must not be negative")
        if index < 0 or index + number > len(self._items) or (number and index >= len(self._items)):
            raise IndexError("remove range out of bounds")
        del self._items[index:index + number]

    def insert(self, index: int, value: Any, number: int = 1) -> None:
        """Insert ``number`` copies of ``value`` at ``index``."""
        self.insert_items(index, [value] * self._check_count(number))

    def insert_items(self, index: int, items: Iterable[Any]) -> None:
        """Insert the given items at ``index``, shifting later elements up."""
        if index < 0 or index > len(self._items):
            raise IndexError("insert index out of bounds")
        items = list(items)
        self.reserve(len(self._items) + len(items))
        self._items[index:index] = items

    def replace(self, index: int, length: int, items: Iterable[Any]) -> None:
        """Replace ``length`` elements at ``index`` with ``items``."""
        if index < 0 or length < 0 or index + length > len(self._items):
            raise IndexError("replace range out of bounds")
        items = list(items)
        number = len(items)
        if length > number:
            self.remove(index + number, length - number)
        elif length < number:
            self.insert(index, self.fill_value, number - length)
        self._items[index:index + number] = items

    def resize(self, new_size: int) -> None:
        """Grow or shrink to ``new_size`` elements, filling new slots."""
        if new_size < 0:
            raise ValueError("size must not be negative")
        self.reserve(new_size)
        if new_size < len(self._items):
            del self._items[new_size:]
        else:
            self._items.extend([self.fill_value] * (new_size - len(self._items)))

    def reserve(self, new_capacity: int) -> None:
        """Make room for at least ``new_capacity`` elements; never shrinks."""
        if new_capacity <= self._capacity:
            return
        grow = self._grow_by
        self._capacity = (new_capacity + grow - 1) // grow * grow

    def clear(self) -> None:
        """Drop all elements and release the reserved capacity."""
        self._items = []
        self._capacity = 0

    def capacity(self) -> int:
        """Number of elements that fit without growing."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported; use replace()")
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    @staticmethod
    def _check_count(number: int) -> int:
        if number < 0:
            raise ValueError("number must not be negative")
        return number


class SimpleArray(Vector):
    """A vector whose editing operations validate their bounds first."""

    def insert_at_grow(self, index: int, value: Any, number: int = 1) -> None:
        """Insert ``number`` copies of ``value``; ``index`` may equal the length."""
        if index > len(self):
            raise IndexError("insert index beyond end of array")
        self.insert(index, value, number)

    def insert_items_at_grow(self, index: int, items: Iterable[Any]) -> None:
        """Insert ``items`` at ``index``; ``index`` may equal the length."""
        if index > len(self):
            raise IndexError("insert index beyond end of array")
        self.insert_items(index, items)

    def remove_at(self, index: int, number: int = 1) -> None:
        """Remove ``number`` elements at ``index``."""
        if index < 0 or index >= len(self):
            raise IndexError("remove index out of bounds")
        if number <= 0:
            raise ValueError("number must be positive")
        self.remove(index, number)

    def adopt(self, items: Iterable[Any], capacity: int | None = None) -> None:
        """Take ``items`` as the whole content, with the given capacity."""
        items = list(items)
        if capacity is None:
            capacity = len(items)
        if capacity < len(items):
            raise ValueError("capacity smaller than the number of items")
        self._items = items
        self._capacity = capacity

    def replace_range(self, index: int, length: int, items: Iterable[Any]) -> None:
        """Replace a non-empty range that lies within the array."""
        if length <= 0:
            raise ValueError("length must be positive")
        if index < 0 or index + length > len(self):
            raise IndexError("replace range out of bounds")
        self.replace(index, length, items)


def _c_text(text: Any) -> str:
    """Text as a C string would hold it: cut at the first NUL."""
    return str(text).partition("\0")[0]


class SimpleString:
    """A small mutable string that concatenates with str and itself."""

    def __init__(self, text: Any = "") -> None:
        self._text = _c_text(text)

    def append(self, text: Any) -> None:
        """Append ``text`` to the end."""
        self._text += _c_text(text)

    def set(self, text: Any) -> None:
        """Replace the content with ``text``."""
        self._text = _c_text(text)

    def is_empty(self) -> bool:
        return not self._text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SimpleString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SimpleString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __add__(self, other: Any) -> "SimpleString":
        if not isinstance(other, (str, SimpleString)):
            return NotImplemented
        return SimpleString(self._text + _c_text(other))

    def __radd__(self, other: Any) -> "SimpleString":
        if not isinstance(other, str):
            return NotImplemented
        return SimpleString(_c_text(other) + self._text)

    def __iadd__(self, other: Any) -> "SimpleString":
        if not isinstance(other, (str, SimpleString)):
            return NotImplemented
        self.append(other)
        return self