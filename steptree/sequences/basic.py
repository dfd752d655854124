"""Basic sequence implementations for StepTree.

These cover the common sources of elements: nothing at all, one element
repeated, a fixed list, and any re-iterable Python collection.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from ..core.sequence import AbstractSequence, Sequence


class EmptySequence(Sequence):
    """A sequence that is always exhausted.

    It has no state, so one shared instance serves every caller.
    """

    _instance: Optional['EmptySequence'] = None

    @classmethod
    def instance(cls) -> 'EmptySequence':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def next(self):
        return None

    def current(self):
        return None

    def index(self) -> int:
        return -1

    def has_next(self) -> bool:
        return False

    def reset(self) -> None:
        pass

    def copy(self) -> 'EmptySequence':
        return self

    def __repr__(self) -> str:
        return "EmptySequence()"


class DuplicateSequence(AbstractSequence):
    """Produces the same element a fixed number of times.

    With the default count of 1 this is the standard way to turn a single
    root element into a restartable sequence.
    """

    def __init__(self, element: Any, count: int = 1):
        """Initialize the sequence.

        Args:
            element: Element to produce (must not be None)
            count: How many times to produce it

        Raises:
            ValueError: If element is None or count is negative
        """
        if element is None:
            raise ValueError("element cannot be None")
        if count < 0:
            raise ValueError(f"count cannot be negative: {count}")
        super().__init__()
        self.element = element
        self.count = count
        self._produced = 0

    def _find_next(self):
        if self._produced >= self.count:
            return None
        self._produced += 1
        return self.element

    def _reset(self) -> None:
        self._produced = 0

    def copy(self) -> 'DuplicateSequence':
        return DuplicateSequence(self.element, self.count)


class ArraySequence(AbstractSequence):
    """Sequence over a snapshot of a list or tuple."""

    def __init__(self, items: Iterable):
        super().__init__()
        self.items = tuple(items)
        self._position = 0

    def _find_next(self):
        if self._position >= len(self.items):
            return None
        item = self.items[self._position]
        self._position += 1
        return item

    def _reset(self) -> None:
        self._position = 0

    def copy(self) -> 'ArraySequence':
        return ArraySequence(self.items)

    def __len__(self) -> int:
        return len(self.items)


_END = object()


class IterableSequence(AbstractSequence):
    """Sequence over any re-iterable collection.

    Elements are pulled lazily through iter(iterable); reset() and copy()
    simply start a fresh iteration, so the iterable must support being
    iterated more than once.
    """

    def __init__(self, iterable: Iterable):
        """Initialize the sequence.

        Args:
            iterable: A collection that can be iterated repeatedly

        Raises:
            TypeError: If iterable is a one-shot iterator
        """
        if isinstance(iterable, Iterator):
            raise TypeError(
                "IterableSequence needs a re-iterable collection, got an iterator; "
                "wrap it with ArraySequence(list(...)) instead"
            )
        super().__init__()
        self.iterable = iterable
        self._iterator = None

    def _find_next(self):
        if self._iterator is None:
            self._iterator = iter(self.iterable)
        element = next(self._iterator, _END)
        if element is _END:
            # keep returning None without touching the iterator again
            self._iterator = iter(())
            return None
        return element

    def _reset(self) -> None:
        self._iterator = None

    def copy(self) -> 'IterableSequence':
        return IterableSequence(self.iterable)


def as_sequence(children: Any) -> Sequence:
    """Coerce a child collection returned by a navigator into a Sequence.

    Args:
        children: None, a Sequence, a one-shot iterator, or a re-iterable.
            A Sequence is used as-is, so the navigator must hand out one
            the walker may consume.

    Returns:
        A Sequence over the children; EmptySequence for None
    """
    if children is None:
        return EmptySequence.instance()
    if isinstance(children, Sequence):
        return children
    if isinstance(children, Iterator):
        return ArraySequence(children)
    return IterableSequence(children)
