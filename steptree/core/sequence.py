"""Sequence abstraction for StepTree.

A Sequence is a lazy, restartable and copyable producer of elements. It is
the single contract the walker relies on: root elements, child lists and
the walker itself are all Sequences.

Exhaustion is signalled by next() returning None, so None can never be an
element of a sequence.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional


class Sequence(ABC):
    """Abstract producer of elements, one at a time.

    Concrete sequences must be restartable (reset) and must be able to
    produce an independent copy positioned at their original start (copy).
    Every Sequence is also a Python iterator over its remaining elements.
    """

    @abstractmethod
    def next(self) -> Optional[Any]:
        """Advance and return the next element, or None when exhausted."""
        pass

    @abstractmethod
    def current(self) -> Optional[Any]:
        """Return the most recently produced element.

        Returns:
            The element, or None before the first successful next()
            since the last reset.
        """
        pass

    @abstractmethod
    def index(self) -> int:
        """Return the zero-based position of current(), -1 before the first element."""
        pass

    @abstractmethod
    def has_next(self) -> bool:
        """Check whether next() would produce an element, without consuming it."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Rewind to the state before iteration began."""
        pass

    @abstractmethod
    def copy(self) -> 'Sequence':
        """Return an independent sequence over the same elements, not yet started.

        Advancing the copy never moves this sequence's cursor, and vice versa.
        """
        pass

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        element = self.next()
        if element is None:
            raise StopIteration
        return element


class AbstractSequence(Sequence):
    """Base class implementing cursor bookkeeping and peeking.

    Subclasses implement _find_next() to compute the following element
    (None when there is none), copy(), and optionally _reset() to rewind
    their own state. has_next() is served from a one-element lookahead
    buffer, so peeking never changes current() or index().

    A subclass must keep returning None from _find_next() once it is
    exhausted, until it is reset.
    """

    def __init__(self):
        self._current = None
        self._index = -1
        self._lookahead = None
        self._peeked = False

    @abstractmethod
    def _find_next(self) -> Optional[Any]:
        """Compute the next element, or None if there are no more."""
        pass

    def _reset(self) -> None:
        """Hook for subclasses to rewind their own state."""
        pass

    def next(self) -> Optional[Any]:
        if self._peeked:
            element = self._lookahead
            self._lookahead = None
            self._peeked = False
        else:
            element = self._find_next()

        if element is None:
            return None

        self._current = element
        self._index += 1
        return element

    def current(self) -> Optional[Any]:
        return self._current

    def index(self) -> int:
        return self._index

    def has_next(self) -> bool:
        if not self._peeked:
            self._lookahead = self._find_next()
            self._peeked = True
        return self._lookahead is not None

    def reset(self) -> None:
        self._current = None
        self._index = -1
        self._lookahead = None
        self._peeked = False
        self._reset()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(index={self._index})"
