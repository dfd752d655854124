"""Filesystem navigator for StepTree.

Lets a walker traverse directory trees. Elements are pathlib.Path objects;
directories have their entries as children, everything else is a leaf.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..core.navigator import Navigator
from ..core.sequence import AbstractSequence, Sequence
from ..sequences.basic import EmptySequence

logger = logging.getLogger(__name__)


class DirectorySequence(AbstractSequence):
    """Lazily lists one directory, sorted by name.

    The directory is read on the first request for an element, and read
    again after reset(), so a restarted walk sees the current contents.
    """

    def __init__(self,
                 directory: Path,
                 include_hidden: bool = True,
                 follow_symlinks: bool = False):
        super().__init__()
        self.directory = directory
        self.include_hidden = include_hidden
        self.follow_symlinks = follow_symlinks
        self._entries: Optional[List[Path]] = None
        self._position = 0

    def _list_entries(self) -> List[Path]:
        entries = []
        try:
            for child_path in sorted(self.directory.iterdir()):
                # Skip hidden files if configured
                if not self.include_hidden and child_path.name.startswith('.'):
                    continue

                # Skip symlinks if not following
                if not self.follow_symlinks and child_path.is_symlink():
                    continue

                entries.append(child_path)
        except PermissionError:
            logger.debug("Permission denied listing %s", self.directory)
        except OSError as e:
            logger.debug("Cannot list %s: %s", self.directory, e)
        return entries

    def _find_next(self) -> Optional[Path]:
        if self._entries is None:
            self._entries = self._list_entries()
        if self._position >= len(self._entries):
            return None
        entry = self._entries[self._position]
        self._position += 1
        return entry

    def _reset(self) -> None:
        self._entries = None
        self._position = 0

    def copy(self) -> 'DirectorySequence':
        return DirectorySequence(self.directory, self.include_hidden, self.follow_symlinks)


class FileSystemNavigator(Navigator):
    """Navigator for filesystem trees.

    Example:
        >>> nav = FileSystemNavigator(include_hidden=False)
        >>> for entry in PreorderWalker(Path("/tmp/project"), nav):
        ...     print(entry)
    """

    def __init__(self,
                 include_hidden: bool = True,
                 follow_symlinks: bool = False):
        """Initialize filesystem navigator.

        Args:
            include_hidden: Whether to include hidden files/directories
            follow_symlinks: Whether to include (and descend into) symbolic links
        """
        self.include_hidden = include_hidden
        self.follow_symlinks = follow_symlinks

    def children(self, element: Union[str, Path]) -> Sequence:
        """Return the entries of a directory; files have no children."""
        path = Path(element) if isinstance(element, str) else element
        try:
            is_dir = path.is_dir()
        except OSError:
            is_dir = False
        if not is_dir:
            return EmptySequence.instance()
        return DirectorySequence(path, self.include_hidden, self.follow_symlinks)
