"""Testing helpers for StepTree consumers."""

from .fixtures import tree_navigator, recursive_preorder, recursive_paths, random_tree

__all__ = [
    'tree_navigator',
    'recursive_preorder',
    'recursive_paths',
    'random_tree',
]
