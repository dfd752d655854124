"""Ready-made navigators for common hierarchies."""

from .filesystem import FileSystemNavigator, DirectorySequence
from .objects import AttributeNavigator, MappingNavigator, AdapterNavigator

__all__ = [
    'FileSystemNavigator',
    'DirectorySequence',
    'AttributeNavigator',
    'MappingNavigator',
    'AdapterNavigator',
]
