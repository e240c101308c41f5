"""Utility for naming class files after the one-class-per-file convention."""

from namespace_autoloader.sanitizer import NAMESPACE_SEPARATOR, sanitize_namespace

CLASS_FILE_PREFIX = "class-"
CLASS_FILE_EXTENSION = ".py"


def class_file_name(identifier: str) -> str:
    """Return the file name for a class, e.g. My_Class -> class-my-class.py."""
    simple_name = sanitize_namespace(identifier).split(NAMESPACE_SEPARATOR)[-1]
    kebab = simple_name.lower().replace("_", "-").replace("\0", "")
    return f"{CLASS_FILE_PREFIX}{kebab}{CLASS_FILE_EXTENSION}"
