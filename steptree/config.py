"""Configuration system for StepTree.

This module defines how users shape a traversal through the high-level
API: which depths to report, which elements to filter out, how many
elements to produce at most, and how trees are rendered as text.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering.

    Depth is counted from the traversal roots, which are at depth 0.
    """

    min_depth: int = 0                # Minimum depth to yield
    max_depth: Optional[int] = None   # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if elements at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of an element at this depth should be explored.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class FilterConfig:
    """Element filters applied by iter_paths() and the functions built on it.

    An element is reported when exclude_filter does not reject it and,
    if include_filter is set, include_filter accepts it. By default the
    walker also skips the subtree below a rejected element; with
    prune_on_exclude=False its descendants are still visited and each
    one is filtered on its own.
    """

    include_filter: Optional[Callable[[Any], bool]] = None
    exclude_filter: Optional[Callable[[Any], bool]] = None
    prune_on_exclude: bool = True

    def matches(self, element: Any) -> bool:
        """Whether element is reported; a rejection by exclude_filter is final."""
        if self.exclude_filter is not None and self.exclude_filter(element):
            return False
        return self.include_filter is None or bool(self.include_filter(element))


@dataclass
class TreeFormat:
    """Glyphs and element rendering used by format_tree()."""

    branch: str = "├── "
    last_branch: str = "└── "
    pipe: str = "│   "
    space: str = "    "
    formatter: Callable[[Any], str] = str

    @classmethod
    def ascii(cls) -> 'TreeFormat':
        """Plain ASCII glyphs for terminals without box-drawing characters."""
        return cls(branch="|-- ", last_branch="`-- ", pipe="|   ", space="    ")


@dataclass
class WalkConfig:
    """Complete configuration for a traversal through the high-level API."""

    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    max_elements: Optional[int] = None  # Stop after yielding this many

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'WalkConfig':
        """Create config for shallow walks.

        Args:
            max_depth: How deep to walk (default 1 = roots and their children)
        """
        return cls(depth=DepthConfig(max_depth=max_depth))

    @classmethod
    def unlimited(cls) -> 'WalkConfig':
        return cls()

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_elements is not None and self.max_elements <= 0:
            errors.append("max_elements must be positive")

        return errors
