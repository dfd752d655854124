"""Core abstractions for StepTree.

This module contains the fundamental building blocks of the StepTree
architecture: sequences, paths, navigators and walkers.
"""

# order matters: navigator pulls in steptree.sequences, which needs
# sequence and path to be importable already
from .sequence import Sequence, AbstractSequence
from .path import Path
from .navigator import Navigator, FunctionNavigator, as_navigator
from .walker import Walker, PreorderWalker, WalkerState
from .processor import Processor

__all__ = [
    "Sequence",
    "AbstractSequence",
    "Path",
    "Navigator",
    "FunctionNavigator",
    "as_navigator",
    "Walker",
    "PreorderWalker",
    "WalkerState",
    "Processor",
]
