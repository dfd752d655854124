"""Walkers for StepTree.

A Walker is a Sequence that produces the elements of a whole hierarchy.
PreorderWalker visits each element before its descendants. Instead of
recursing, it keeps an explicit stack of frames (one per level being
consumed), which is what makes the traversal steppable: the caller can
stop after any element, prune the subtree below it, set a breakpoint
that pauses traversal when a level completes, or copy the walker and
traverse again independently.
"""

import logging
from abc import abstractmethod
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple, Union

from .sequence import AbstractSequence, Sequence
from .path import Path
from .navigator import Navigator, as_navigator
from ..sequences.basic import DuplicateSequence, EmptySequence, as_sequence
from ..errors import WalkerStateError

logger = logging.getLogger(__name__)


class WalkerState(Enum):
    """Observable states of a walker."""
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    PAUSED = "paused"
    EXHAUSTED = "exhausted"


class Walker(AbstractSequence):
    """A Sequence over every element of a hierarchy, with traversal controls."""

    @abstractmethod
    def current_path(self) -> Optional[Path]:
        """Return the Path of the most recently produced element."""
        pass

    @abstractmethod
    def skip(self) -> None:
        """Do not descend into the children of the current element."""
        pass

    @abstractmethod
    def add_breakpoint(self) -> None:
        """Pause traversal once the current level is exhausted."""
        pass

    @abstractmethod
    def is_paused(self) -> bool:
        pass

    @abstractmethod
    def resume(self) -> None:
        """Continue after a breakpoint pause; no-op when not paused."""
        pass


class _Frame:
    """One level of in-progress traversal.

    Holds the sequence of siblings being consumed at this level.
    """

    __slots__ = ("sequence", "breakpoint", "skipped")

    def __init__(self, sequence: Sequence):
        self.sequence = sequence
        self.breakpoint = False
        self.skipped = False

    def pull(self) -> Optional[Tuple[Any, int, bool]]:
        """Consume the next sibling as (element, index, is_last_sibling)."""
        element = self.sequence.next()
        if element is None:
            return None
        return element, self.sequence.index(), not self.sequence.has_next()

    def peek(self) -> bool:
        return self.sequence.has_next()

    def holds(self) -> bool:
        """Whether an exhausted frame stays on the stack instead of popping."""
        return self.breakpoint and not self.skipped


class PreorderWalker(Walker):
    """Depth-first, preorder walker driven by an explicit stack of frames.

    The bottom frame wraps a copy of the root sequence; every produced
    element pushes a frame over its children, obtained from the navigator
    at that moment. The current Path always has one node per frame below
    the top one.

    Example:
        >>> tree = {"R": ["P", "Q"], "P": ["X", "Y"]}
        >>> walker = PreorderWalker("R", lambda e: tree.get(e))
        >>> list(walker)
        ['R', 'P', 'X', 'Y', 'Q']
        >>> walker.reset()
        >>> walker.next(), walker.next()
        ('R', 'P')
        >>> walker.skip()
        >>> walker.next()
        'Q'
    """

    def __init__(self,
                 root: Union[Sequence, Any],
                 navigator: Union[Navigator, Callable[[Any], Any]]):
        """Initialize the walker.

        Args:
            root: Sequence of root elements, or a single root element
            navigator: Navigator (or callable) giving each element's children

        Raises:
            ValueError: If root is None
        """
        super().__init__()
        if root is None:
            raise ValueError("root cannot be None")
        self._source = root if isinstance(root, Sequence) else DuplicateSequence(root)
        self.navigator = as_navigator(navigator)
        self._stack: List[_Frame] = []
        self._path: Optional[Path] = None
        self._started = False
        self._replaying = False
        self._seed()

    @classmethod
    def from_element(cls, element: Any, navigator) -> 'PreorderWalker':
        """Create a walker rooted at a single element."""
        return cls(DuplicateSequence(element), navigator)

    def _seed(self) -> None:
        self._path = None
        self._started = False
        self._replaying = False
        self._stack = [_Frame(self._source.copy())]

    def _replay(self) -> Any:
        """Produce the resumed element again with a fresh frame over its children."""
        self._replaying = False
        # the re-produced element keeps its ordinal
        self._index -= 1
        old = self._stack.pop()
        frame = _Frame(as_sequence(self.navigator.children(self._path.element)))
        # a breakpoint set between resume() and this advance still applies
        frame.breakpoint = old.holds()
        self._stack.append(frame)
        return self._path.element

    # Sequence

    def _find_next(self) -> Optional[Any]:
        self._started = True
        if self._replaying:
            return self._replay()
        stack = self._stack

        # pop exhausted levels
        entry = None
        while stack:
            frame = stack[-1]
            entry = frame.pull()
            if entry is not None:
                break
            if frame.holds():
                logger.debug("Walker paused at depth %d", len(stack) - 1)
                return None
            stack.pop()
            if self._path is not None:
                self._path = self._path.parent

        if entry is None:
            return None

        element, index, is_last = entry
        if self._path is None:
            self._path = Path(element, index, is_last)
        else:
            self._path = self._path.append(element, index, is_last)
        stack.append(_Frame(as_sequence(self.navigator.children(element))))
        return element

    def has_next(self) -> bool:
        # answered from the frames so peeking never moves the current path
        if self._replaying:
            return True
        for frame in reversed(self._stack):
            if frame.peek():
                return True
            if frame.holds():
                return False
        return False

    def _reset(self) -> None:
        self._seed()
        logger.debug("Walker reset")

    def copy(self) -> 'PreorderWalker':
        logger.debug("Walker copied")
        return PreorderWalker(self._source.copy(), self.navigator)

    # Walker

    @property
    def state(self) -> WalkerState:
        if not self._stack:
            return WalkerState.EXHAUSTED
        if self.is_paused():
            return WalkerState.PAUSED
        if not self._started:
            return WalkerState.NOT_STARTED
        return WalkerState.ACTIVE

    @property
    def depth(self) -> int:
        """Depth of the current element, -1 when there is none."""
        return -1 if self._path is None else self._path.depth

    def current_path(self) -> Optional[Path]:
        return self._path

    def skip(self) -> None:
        if not self._stack:
            raise WalkerStateError("Cannot skip: walker has no active level")
        # a resumed element is not offered again once its subtree is skipped
        self._replaying = False
        frame = self._stack[-1]
        frame.sequence = EmptySequence.instance()
        frame.skipped = True
        frame.breakpoint = False
        logger.debug("Skipping descendants at depth %d", len(self._stack) - 1)

    def add_breakpoint(self) -> None:
        if not self._stack:
            raise WalkerStateError("Cannot add breakpoint: walker has no active level")
        self._stack[-1].breakpoint = True
        logger.debug("Breakpoint added at depth %d", len(self._stack) - 1)

    def is_paused(self) -> bool:
        return bool(self._stack) and self._stack[-1].holds()

    def resume(self) -> None:
        if not self.is_paused():
            return
        self._stack[-1].breakpoint = False
        if len(self._stack) > 1 and not self._replaying:
            # the next advance re-offers the element whose subtree paused
            self._replaying = True
        logger.debug("Walker resumed at depth %d", len(self._stack) - 1)

    def __repr__(self) -> str:
        return (f"PreorderWalker(state={self.state.value}, "
                f"path={self._path.format() if self._path else None!r})")
