"""Navigators over in-memory structures.

These cover the usual shapes of hierarchical Python data: objects (or
dicts) that hold their children under a named attribute or key, plain
adjacency mappings, and adapter objects exposing get_children(node).
"""

from collections.abc import Mapping
from typing import Any, Iterable

from ..core.navigator import Navigator
from ..core.sequence import Sequence
from ..sequences.basic import as_sequence


def _stored_children(value: Any) -> Sequence:
    """Sequence over children kept inside the data itself.

    A Sequence stored in the data is copied, so walkers, their copies and
    their resets each get a cursor of their own.
    """
    if isinstance(value, Sequence):
        return value.copy()
    return as_sequence(value)


class AttributeNavigator(Navigator):
    """Children are found under an attribute (or mapping key) of each element.

    The stored value may be None (a leaf), any iterable, or a Sequence,
    which is copied on every call.

    Example:
        >>> doc = {"name": "root", "children": [{"name": "leaf"}]}
        >>> [e["name"] for e in PreorderWalker(doc, AttributeNavigator())]
        ['root', 'leaf']
    """

    def __init__(self, attr: str = "children"):
        self.attr = attr

    def children(self, element: Any) -> Sequence:
        if isinstance(element, Mapping):
            return _stored_children(element.get(self.attr))
        return _stored_children(getattr(element, self.attr, None))

    def __repr__(self) -> str:
        return f"AttributeNavigator({self.attr!r})"


class MappingNavigator(Navigator):
    """Children come from an adjacency mapping {parent: [children]}.

    Elements missing from the mapping are leaves. Sequence values are
    copied on every call, like in AttributeNavigator.
    """

    def __init__(self, adjacency: Mapping):
        self.adjacency = adjacency

    def children(self, element: Any) -> Sequence:
        return _stored_children(self.adjacency.get(element))


class AdapterNavigator(Navigator):
    """Bridges objects that navigate with get_children(node).

    Any tree adapter exposing get_children(node) -> iterable can drive a
    walker through this navigator. The returned iterator is materialized
    once per call, when the walker reaches that node.
    """

    def __init__(self, adapter: Any):
        if not callable(getattr(adapter, "get_children", None)):
            raise TypeError(
                f"{type(adapter).__name__} has no get_children(node) method"
            )
        self.adapter = adapter

    def children(self, element: Any) -> Sequence:
        children: Iterable = self.adapter.get_children(element)
        return as_sequence(children)
