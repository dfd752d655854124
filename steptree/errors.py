"""Exceptions raised by StepTree.

All library errors derive from StepTreeError so callers can catch them
in one place. Errors raised by caller-supplied navigators or sequences
are never wrapped; they propagate unchanged.
"""


class StepTreeError(Exception):
    """Base class for all StepTree errors."""
    pass


class WalkerStateError(StepTreeError):
    """Raised when a walker operation needs an active traversal level.

    skip() and add_breakpoint() act on the top frame of the walker's
    stack; once traversal has completed there is no frame to act on.
    """
    pass


class ConfigurationError(StepTreeError):
    """Raised when a WalkConfig fails validation."""
    pass
