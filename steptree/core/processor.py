"""Visitor hooks for driving a walker to completion."""

from abc import ABC, abstractmethod
from typing import Any

from .path import Path


class Processor(ABC):
    """Receives pre- and post-visit callbacks during walk().

    pre_process is called when an element is produced; returning False
    prunes its subtree. post_process is called once everything below an
    element has been produced, and only for elements whose pre_process
    returned True.
    """

    @abstractmethod
    def pre_process(self, element: Any, path: Path) -> bool:
        """Visit element before its descendants.

        Returns:
            True to descend into the children, False to skip them
        """
        pass

    def post_process(self, element: Any, path: Path) -> None:
        """Visit element after its descendants."""
        pass
