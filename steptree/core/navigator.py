"""Navigator abstraction for StepTree.

The Navigator is what makes the walker work with any hierarchy. The walker
never looks inside elements; it only asks the navigator for the children
of each element it produces, one element at a time, as traversal reaches it.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional, Union

from .sequence import Sequence
from ..sequences.basic import as_sequence


class Navigator(ABC):
    """Maps an element to the Sequence of its children.

    Implementations should be free of side effects on traversal state:
    the walker may call children() again for the same element after a
    reset, a copy, or a resume. Caching, if wanted, belongs here and not
    in the walker.
    """

    @abstractmethod
    def children(self, element: Any) -> Sequence:
        """Return the children of element.

        Args:
            element: An element previously produced by a traversal

        Returns:
            Sequence of child elements (EmptySequence for leaves)
        """
        pass


class FunctionNavigator(Navigator):
    """Navigator backed by a plain callable.

    The callable may return a Sequence, any iterable, or None for a leaf.
    Iterables are coerced with as_sequence().

    Example:
        >>> tree = {"R": ["P", "Q"], "P": ["X", "Y"]}
        >>> nav = FunctionNavigator(lambda e: tree.get(e))
        >>> list(nav.children("R"))
        ['P', 'Q']
    """

    def __init__(self, func: Callable[[Any], Optional[Union[Sequence, Iterable]]]):
        self.func = func

    def children(self, element: Any) -> Sequence:
        return as_sequence(self.func(element))

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"FunctionNavigator({name})"


def as_navigator(navigator: Union[Navigator, Callable[[Any], Any]]) -> Navigator:
    """Accept either a Navigator or a callable and return a Navigator.

    Raises:
        TypeError: If navigator is neither
    """
    if isinstance(navigator, Navigator):
        return navigator
    if callable(navigator):
        return FunctionNavigator(navigator)
    raise TypeError(f"Expected a Navigator or a callable, got {type(navigator).__name__}")
