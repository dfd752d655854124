"""Immutable ancestry paths for StepTree.

A Path node records one element together with its position among its
siblings and whether it was the last sibling when produced. Nodes link to
their parent, so a Path is the whole chain from a traversal root down to
one element. Nodes are never mutated after construction, which lets many
descendant paths (and many walkers) share the same ancestors.
"""

from typing import Any, Callable, Iterator, List, Optional


class Path:
    """One node of an ancestry chain.

    Attributes are read-only. Equality compares the whole chain by value:
    two paths are equal when every level has the same element, index and
    last-sibling flag.

    Example:
        >>> root = Path("R")
        >>> child = root.append("P", 0)
        >>> child.elements()
        ['R', 'P']
        >>> str(child)
        'R/P'
    """

    __slots__ = ("_element", "_index", "_is_last_sibling", "_parent", "_depth", "_hash")

    def __init__(self,
                 element: Any,
                 index: int = 0,
                 is_last_sibling: bool = False,
                 parent: Optional['Path'] = None):
        """Create a path node.

        Args:
            element: The element at this level
            index: Position of the element among its siblings
            is_last_sibling: Whether no sibling followed the element
            parent: Enclosing path, or None for a root
        """
        _set = object.__setattr__
        _set(self, "_element", element)
        _set(self, "_index", index)
        _set(self, "_is_last_sibling", is_last_sibling)
        _set(self, "_parent", parent)
        _set(self, "_depth", 0 if parent is None else parent._depth + 1)
        _set(self, "_hash", None)

    @property
    def element(self) -> Any:
        return self._element

    @property
    def index(self) -> int:
        """Position of the element among its siblings."""
        return self._index

    @property
    def is_last_sibling(self) -> bool:
        return self._is_last_sibling

    @property
    def parent(self) -> Optional['Path']:
        return self._parent

    @property
    def depth(self) -> int:
        """Number of ancestors; a root path has depth 0."""
        return self._depth

    @property
    def root(self) -> 'Path':
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def append(self, element: Any, index: int, is_last_sibling: bool = False) -> 'Path':
        """Return a new path extending this one by one level."""
        return Path(element, index, is_last_sibling, parent=self)

    def ancestor(self, levels: int) -> Optional['Path']:
        """Return the path `levels` steps up, or None past the root.

        Raises:
            ValueError: If levels is negative
        """
        if levels < 0:
            raise ValueError(f"levels cannot be negative: {levels}")
        node = self
        for _ in range(levels):
            if node is None:
                return None
            node = node._parent
        return node

    def iter_ancestors(self) -> Iterator['Path']:
        """Iterate from this node up to the root, self included."""
        node = self
        while node is not None:
            yield node
            node = node._parent

    def elements(self) -> List[Any]:
        """Return the elements from the root down to this node."""
        result = [node._element for node in self.iter_ancestors()]
        result.reverse()
        return result

    def format(self, separator: str = "/", formatter: Callable[[Any], str] = str) -> str:
        """Render the chain root-first, e.g. 'R/P/X'."""
        return separator.join(formatter(element) for element in self.elements())

    def __len__(self) -> int:
        return self._depth + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        if self._depth != other._depth:
            return False
        a, b = self, other
        while a is not None:
            if a is b:
                # shared ancestry from here up
                return True
            if (a._index != b._index
                    or a._is_last_sibling != b._is_last_sibling
                    or a._element != b._element):
                return False
            a, b = a._parent, b._parent
        return True

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash(tuple(
                (node._element, node._index, node._is_last_sibling)
                for node in self.iter_ancestors()
            )))
        return self._hash

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Path is immutable; cannot set {name!r}")

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (f"Path({self.format()!r}, index={self._index}, "
                f"last={self._is_last_sibling})")
