"""Sequences built from other sequences."""

from typing import Any, Callable

from ..core.sequence import AbstractSequence, Sequence


class FilteredSequence(AbstractSequence):
    """Yields only the delegate's elements that satisfy a predicate."""

    def __init__(self, delegate: Sequence, predicate: Callable[[Any], bool]):
        super().__init__()
        self.delegate = delegate
        self.predicate = predicate

    def _find_next(self):
        while True:
            element = self.delegate.next()
            if element is None or self.predicate(element):
                return element

    def _reset(self) -> None:
        self.delegate.reset()

    def copy(self) -> 'FilteredSequence':
        return FilteredSequence(self.delegate.copy(), self.predicate)


class ConcatSequence(AbstractSequence):
    """Yields every element of each delegate in turn."""

    def __init__(self, *sequences: Sequence):
        super().__init__()
        self.sequences = list(sequences)
        self._position = 0

    def _find_next(self):
        while self._position < len(self.sequences):
            element = self.sequences[self._position].next()
            if element is not None:
                return element
            self._position += 1
        return None

    def _reset(self) -> None:
        for sequence in self.sequences:
            sequence.reset()
        self._position = 0

    def copy(self) -> 'ConcatSequence':
        return ConcatSequence(*(sequence.copy() for sequence in self.sequences))
