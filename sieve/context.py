"""
Context manager for validation configuration (e.g., maximum nesting depth).
"""

from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_MAX_DEPTH = 200

# Context variable for the active depth limit
_max_depth: ContextVar[int] = ContextVar("max_depth", default=DEFAULT_MAX_DEPTH)

# Number of compound validators currently being descended through
_depth: ContextVar[int] = ContextVar("depth", default=0)


def get_max_depth() -> int:
    """Return the nesting depth limit currently in effect."""
    return _max_depth.get()


def current_depth() -> int:
    """Return how many compound validators the current call is nested inside."""
    return _depth.get()


@contextmanager
def validation_context(*, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Context manager for validation configuration.

    Args:
        max_depth: Maximum number of nested sequence/record levels a single
                   validation call may descend through. Deeper input fails
                   with an issue instead of exhausting the call stack.

    Example:
        from sieve import numeric, sequence_of, validation_context

        matrix = sequence_of(sequence_of(numeric()))

        with validation_context(max_depth=1):
            matrix.check_safe([[1, 2]])  # Err: depth limit hit at path (0,)
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    token = _max_depth.set(max_depth)
    try:
        yield
    finally:
        _max_depth.reset(token)


@contextmanager
def descend():
    """Count one more level of nesting for the duration of the block."""
    token = _depth.set(_depth.get() + 1)
    try:
        yield
    finally:
        _depth.reset(token)
