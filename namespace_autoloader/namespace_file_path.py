"""Utility for deriving the intermediate directory path from a namespace."""

import os

from namespace_autoloader.autoloader_config import AutoloaderConfig
from namespace_autoloader.sanitizer import NAMESPACE_SEPARATOR, sanitize_namespace


def namespace_file_path(identifier: str, config: AutoloaderConfig) -> str:
    """Return the directories between the base directory and the class file.

    The namespace prefix is stripped from the front of the identifier and the
    simple class name is dropped:

        Proj\\Admin\\Settings_Page -> Admin/

    The result always ends with a separator unless it is empty, in which case
    the class file sits directly in the base directory.
    """
    sanitized_class = sanitize_namespace(identifier)
    sanitized_prefix = sanitize_namespace(config.namespace_prefix, add_separator=True)

    remainder = sanitized_class
    if remainder.startswith(sanitized_prefix):
        remainder = remainder[len(sanitized_prefix) :]

    segments = remainder.split(NAMESPACE_SEPARATOR)[:-1]
    if not segments:
        return ""

    path = os.sep.join(segments) + os.sep
    if config.force_to_lowercase:
        path = path.lower()
    return path
