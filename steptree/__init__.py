"""StepTree - steppable tree walking.

StepTree walks any hierarchy - filesystem, nested objects, JSON, adjacency
maps, or custom data structures - one element at a time. You supply a
Navigator that knows how to find an element's children; StepTree supplies
a preorder walker you can pause, skip through, reset and copy.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Iterate:
    from steptree import preorder
    for element in preorder(root, navigator): ...

Step by hand:
    from steptree import PreorderWalker
    walker = PreorderWalker(root, navigator)
    walker.next(); walker.skip(); walker.current_path()
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .core import (
    Sequence,
    AbstractSequence,
    Path,
    Navigator,
    FunctionNavigator,
    Walker,
    PreorderWalker,
    WalkerState,
    Processor,
)
from .sequences import (
    EmptySequence,
    DuplicateSequence,
    ArraySequence,
    IterableSequence,
    FilteredSequence,
    ConcatSequence,
    PathSequence,
)
from .adapters import (
    FileSystemNavigator,
    AttributeNavigator,
    MappingNavigator,
    AdapterNavigator,
)
from .config import WalkConfig, DepthConfig, FilterConfig, TreeFormat
from .errors import StepTreeError, WalkerStateError, ConfigurationError
from .api import (
    iter_paths,
    preorder,
    count_elements,
    find_elements,
    walk,
    format_tree,
    print_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Sequence",
    "AbstractSequence",
    "Path",
    "Navigator",
    "FunctionNavigator",
    "Walker",
    "PreorderWalker",
    "WalkerState",
    "Processor",
    # Sequences
    "EmptySequence",
    "DuplicateSequence",
    "ArraySequence",
    "IterableSequence",
    "FilteredSequence",
    "ConcatSequence",
    "PathSequence",
    # Navigators
    "FileSystemNavigator",
    "AttributeNavigator",
    "MappingNavigator",
    "AdapterNavigator",
    # Config
    "WalkConfig",
    "DepthConfig",
    "FilterConfig",
    "TreeFormat",
    # Errors
    "StepTreeError",
    "WalkerStateError",
    "ConfigurationError",
    # API
    "iter_paths",
    "preorder",
    "count_elements",
    "find_elements",
    "walk",
    "format_tree",
    "print_tree",
]
