"""Outcome of a single autoload attempt."""

from enum import Enum


class LoadResult(Enum):
    """What happened when a resolver was asked to load an identifier."""

    LOADED = "loaded"
    SKIPPED = "skipped"  # not ours, or already defined
    NOT_FOUND = "not_found"
