"""Test fixtures for StepTree consumers.

These helpers build small in-memory trees and compute the expected
results of a traversal with plain recursion, so a test can compare what a
walker produces against an independent reference.
"""

import random
from typing import Any, Dict, List, Mapping, Sequence as PySequence

from ..adapters.objects import MappingNavigator
from ..core.navigator import Navigator
from ..core.path import Path

Adjacency = Dict[Any, List[Any]]


def tree_navigator(adjacency: Mapping) -> Navigator:
    """Navigator over an adjacency mapping {parent: [children]}."""
    return MappingNavigator(adjacency)


def recursive_preorder(root: Any, navigator: Navigator) -> List[Any]:
    """Reference preorder traversal using ordinary recursion."""
    result = [root]
    for child in navigator.children(root):
        result.extend(recursive_preorder(child, navigator))
    return result


def recursive_paths(roots: PySequence, navigator: Navigator) -> List[Path]:
    """Reference list of Paths for a preorder walk over several roots."""
    result: List[Path] = []

    def visit(path: Path) -> None:
        result.append(path)
        children = list(navigator.children(path.element))
        for index, child in enumerate(children):
            visit(path.append(child, index, index == len(children) - 1))

    for index, root in enumerate(roots):
        visit(Path(root, index, index == len(roots) - 1))
    return result


def random_tree(seed: int,
                max_children: int = 3,
                max_depth: int = 4) -> Adjacency:
    """Build a reproducible random tree rooted at "n".

    Node names encode their position: the second child of the root's
    first child is "n.0.1". Leaves do not appear as keys.

    Args:
        seed: Seed for the random generator
        max_children: Upper bound on children per node
        max_depth: Depth below which nodes get no children

    Returns:
        Adjacency mapping for tree_navigator()
    """
    rng = random.Random(seed)
    adjacency: Adjacency = {}
    pending = [("n", 0)]

    while pending:
        name, depth = pending.pop()
        if depth >= max_depth:
            continue
        count = rng.randint(0, max_children)
        if count == 0:
            continue
        children = [f"{name}.{i}" for i in range(count)]
        adjacency[name] = children
        pending.extend((child, depth + 1) for child in children)

    return adjacency
