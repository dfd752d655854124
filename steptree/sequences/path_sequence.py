"""Lift a sequence of elements into a sequence of Paths.

PathSequence bridges flat iteration results into the path-aware world:
each element the delegate produces comes back as a Path one level below
a fixed anchor, numbered from zero.
"""

from typing import Optional

from ..core.path import Path
from ..core.sequence import AbstractSequence, Sequence


class PathSequence(AbstractSequence):
    """Pairs each delegate element with a Path extending a fixed anchor.

    The anchor is shared, read-only context: it is never mutated, and
    copies of this sequence reuse it. Passing anchor=None makes every
    produced Path a root.

    Example:
        >>> anchor = Path("R")
        >>> paths = PathSequence(anchor, ArraySequence(["a", "b"]))
        >>> [str(p) for p in paths]
        ['R/a', 'R/b']
    """

    def __init__(self, anchor: Optional[Path], delegate: Sequence):
        super().__init__()
        self.anchor = anchor
        self.delegate = delegate
        self._position = 0
        self.delegate.reset()

    def _find_next(self) -> Optional[Path]:
        element = self.delegate.next()
        if element is None:
            return None
        position = self._position
        self._position += 1
        is_last = not self.delegate.has_next()
        if self.anchor is None:
            return Path(element, position, is_last)
        return self.anchor.append(element, position, is_last)

    def _reset(self) -> None:
        self.delegate.reset()
        self._position = 0

    def copy(self) -> 'PathSequence':
        return PathSequence(self.anchor, self.delegate.copy())
