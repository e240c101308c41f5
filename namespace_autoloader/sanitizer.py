"""Helpers for trimming namespaces and path fragments."""

import os

NAMESPACE_SEPARATOR = "\\"


def sanitize_namespace(namespace: str, *, add_separator: bool = False) -> str:
    """Trim namespace separators from both ends of a namespace.

    With ``add_separator`` a single namespace separator is appended, so the
    result can be matched as a whole leading segment of an identifier.
    """
    trimmed = namespace.strip(NAMESPACE_SEPARATOR)
    if add_separator:
        return trimmed + NAMESPACE_SEPARATOR
    return trimmed


def sanitize_file_path(file_path: str) -> str:
    """Trim filesystem separators from both ends of a path fragment."""
    return file_path.strip(os.sep)


def untrailingslashit(path: str) -> str:
    """Remove trailing forward and back slashes."""
    return path.rstrip("/\\")
