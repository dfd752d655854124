"""Ready-made Sequence implementations."""

from .basic import (
    EmptySequence,
    DuplicateSequence,
    ArraySequence,
    IterableSequence,
    as_sequence,
)
from .composite import FilteredSequence, ConcatSequence
from .path_sequence import PathSequence

__all__ = [
    'EmptySequence',
    'DuplicateSequence',
    'ArraySequence',
    'IterableSequence',
    'as_sequence',
    'FilteredSequence',
    'ConcatSequence',
    'PathSequence',
]
