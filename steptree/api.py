"""High-level API for StepTree.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the walker for ease of use in simple
cases; reach for PreorderWalker directly when you need to pause, skip or
copy mid-traversal.
"""

import logging
import sys
from typing import Any, Callable, Iterator, List, Optional, TextIO, Union

from .config import TreeFormat, WalkConfig
from .core.navigator import Navigator
from .core.path import Path
from .core.processor import Processor
from .core.sequence import Sequence
from .core.walker import PreorderWalker, Walker
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

NavigatorLike = Union[Navigator, Callable[[Any], Any]]


def _checked(config: Optional[WalkConfig]) -> WalkConfig:
    if config is None:
        return WalkConfig()
    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
    return config


def iter_paths(root: Union[Sequence, Any],
               navigator: NavigatorLike,
               config: Optional[WalkConfig] = None) -> Iterator[Path]:
    """Walk a hierarchy in preorder, yielding the Path of each element.

    Elements beyond config.depth.max_depth are never produced, and
    excluded elements are pruned together with their subtrees unless
    config.filter.prune_on_exclude is False.

    Args:
        root: Sequence of root elements, or a single root element
        navigator: Navigator or callable giving an element's children
        config: Optional depth, filter and size limits

    Yields:
        Path for every element that passes the configuration

    Raises:
        ConfigurationError: If config fails validation
    """
    config = _checked(config)
    walker = PreorderWalker(root, navigator)
    produced = 0

    for element in walker:
        path = walker.current_path()
        depth = path.depth

        included = config.filter.matches(element)
        if (not config.depth.should_explore(depth)
                or (not included and config.filter.prune_on_exclude)):
            walker.skip()

        if included and config.depth.should_yield(depth):
            yield path
            produced += 1
            if config.max_elements is not None and produced >= config.max_elements:
                logger.debug("Stopping after max_elements=%d", config.max_elements)
                return


def preorder(root: Union[Sequence, Any],
             navigator: NavigatorLike,
             config: Optional[WalkConfig] = None) -> Iterator[Any]:
    """Walk a hierarchy in preorder, yielding elements.

    Example:
        >>> tree = {"R": ["P", "Q"], "P": ["X", "Y"]}
        >>> list(preorder("R", tree.get))
        ['R', 'P', 'X', 'Y', 'Q']
    """
    for path in iter_paths(root, navigator, config):
        yield path.element


def count_elements(root: Union[Sequence, Any],
                   navigator: NavigatorLike,
                   config: Optional[WalkConfig] = None) -> int:
    """Count the elements a walk would produce."""
    return sum(1 for _ in iter_paths(root, navigator, config))


def find_elements(root: Union[Sequence, Any],
                  navigator: NavigatorLike,
                  predicate: Callable[[Any], bool],
                  config: Optional[WalkConfig] = None) -> List[Any]:
    """Return every element, in preorder, for which predicate is true.

    Unlike config filters, the predicate never prunes: descendants of a
    non-matching element are still searched.
    """
    return [element for element in preorder(root, navigator, config)
            if predicate(element)]


def walk(walker: Walker, processor: Processor) -> bool:
    """Drive a walker to the end, calling the processor's hooks.

    pre_process runs for each element as it is produced; returning False
    skips its subtree. post_process runs once an element's subtree is
    complete, innermost first, so hooks always arrive in matching pairs.

    Args:
        walker: Walker to drive (used from its current position)
        processor: Receives the callbacks

    Returns:
        True if the walker was exhausted, False if it stopped at a breakpoint.
        Elements still open when a breakpoint stops the walk are post-processed
        before returning.
    """
    open_paths: List[Path] = []

    while True:
        element = walker.next()
        if element is None:
            break
        path = walker.current_path()

        while open_paths and open_paths[-1].depth >= path.depth:
            done = open_paths.pop()
            processor.post_process(done.element, done)

        if processor.pre_process(element, path):
            open_paths.append(path)
        else:
            walker.skip()

    while open_paths:
        done = open_paths.pop()
        processor.post_process(done.element, done)

    paused = walker.is_paused()
    if paused:
        logger.debug("walk() stopped at a breakpoint")
    return not paused


def format_tree(root: Union[Sequence, Any],
                navigator: NavigatorLike,
                config: Optional[WalkConfig] = None,
                tree_format: Optional[TreeFormat] = None) -> str:
    """Render a hierarchy as an indented tree, one line per element.

    Connectors come from each Path's last-sibling flags, so the output is
    produced in a single pass without looking ahead.

    Example:
        >>> tree = {"R": ["P", "Q"], "P": ["X", "Y"]}
        >>> print(format_tree("R", tree.get))
        R
        ├── P
        │   ├── X
        │   └── Y
        └── Q
    """
    tree_format = tree_format or TreeFormat()
    lines = []

    for path in iter_paths(root, navigator, config):
        if path.depth == 0:
            lines.append(tree_format.formatter(path.element))
            continue

        # one column per ancestor below the root, outermost first
        columns = []
        node = path.parent
        while node is not None and node.depth > 0:
            columns.append(tree_format.space if node.is_last_sibling else tree_format.pipe)
            node = node.parent
        columns.reverse()

        connector = tree_format.last_branch if path.is_last_sibling else tree_format.branch
        lines.append("".join(columns) + connector + tree_format.formatter(path.element))

    return "\n".join(lines)


def print_tree(root: Union[Sequence, Any],
               navigator: NavigatorLike,
               config: Optional[WalkConfig] = None,
               tree_format: Optional[TreeFormat] = None,
               file: Optional[TextIO] = None) -> None:
    """Print format_tree() output to file (stdout by default)."""
    print(format_tree(root, navigator, config, tree_format), file=file or sys.stdout)
