"""Utility for determining the directory that holds all class files."""

import os

from namespace_autoloader.autoloader_config import AutoloaderConfig
from namespace_autoloader.sanitizer import sanitize_file_path, untrailingslashit


def base_directory(config: AutoloaderConfig) -> str:
    """Return the root directory joined with the classes subdirectory."""
    # /proj/ + inc/ -> /proj/inc/
    classes_dir = sanitize_file_path(config.classes_dir)
    classes_part = classes_dir.rstrip(os.sep) + os.sep if classes_dir else ""
    return untrailingslashit(config.directory) + os.sep + classes_part
