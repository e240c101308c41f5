"""Resolver that maps namespaced class identifiers to class files and loads them."""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from namespace_autoloader.autoloader_config import AutoloaderConfig
from namespace_autoloader.base_directory import base_directory
from namespace_autoloader.class_file_name import class_file_name
from namespace_autoloader.load_result import LoadResult
from namespace_autoloader.namespace_file_path import namespace_file_path
from namespace_autoloader.sanitizer import NAMESPACE_SEPARATOR, sanitize_namespace

logger = logging.getLogger(__name__)

TOOL_NAME = "Namespace Autoloader"


class ClassHost(Protocol):
    """Capabilities the autoloader needs from whoever owns the class table."""

    def is_defined(self, identifier: str) -> bool: ...

    def include_once(self, path: str | Path, namespace: str) -> bool: ...


class Registrar(Protocol):
    """Anything that keeps a chain of autoload callbacks."""

    def register(self, callback: Callable[[str], object]) -> None: ...


class NamespaceAutoloader:
    """Loads ``class-<name>.py`` files for identifiers under one namespace prefix.

    Example:
        ``Proj\\Admin\\Settings_Page`` with directory ``/proj``, classes_dir
        ``inc`` and lowercasing enabled resolves to
        ``/proj/inc/admin/class-settings-page.py``.
    """

    def __init__(
        self,
        config: AutoloaderConfig,
        host: ClassHost,
        diagnostic: Callable[[str], object] | None = None,
    ) -> None:
        """Bind the autoloader to its options, host and diagnostic sink."""
        self._config = config
        self._host = host
        self._diagnostic = diagnostic or logger.error

    @property
    def config(self) -> AutoloaderConfig:
        return self._config

    def init(self, registry: Registrar) -> None:
        """Register :meth:`autoload` with ``registry``. Not idempotent."""
        registry.register(self.autoload)

    def owns(self, identifier: str) -> bool:
        """Check whether this autoloader should try to load ``identifier``.

        The prefix, trimmed of namespace separators, only has to appear
        somewhere in the identifier, not at its start.
        """
        if sanitize_namespace(self._config.namespace_prefix) not in identifier:
            return False
        return not self._host.is_defined(identifier)

    def build_path(self, identifier: str) -> str:
        """Compute the class file path for ``identifier``."""
        return (
            base_directory(self._config)
            + namespace_file_path(identifier, self._config)
            + class_file_name(identifier)
        )

    def convert_class_to_file(
        self, identifier: str, *, check_loading_need: bool = False
    ) -> str | None:
        """Return the class file path, or None if loading is not needed."""
        if check_loading_need and not self.owns(identifier):
            return None
        return self.build_path(identifier)

    def load(self, identifier: str) -> LoadResult:
        """Include the class file for ``identifier`` if it is ours and missing."""
        if not self.owns(identifier):
            return LoadResult.SKIPPED

        path = self.build_path(identifier)

        if not os.path.isfile(path):
            self._diagnostic(f"{TOOL_NAME} could not load file: {path}")
            return LoadResult.NOT_FOUND

        self._host.include_once(path, _namespace_of(identifier))
        return LoadResult.LOADED

    def autoload(self, identifier: str) -> None:
        """Autoload callback; same as :meth:`load` without the result."""
        self.load(identifier)


def _namespace_of(identifier: str) -> str:
    sanitized = sanitize_namespace(identifier)
    if NAMESPACE_SEPARATOR not in sanitized:
        return ""
    return sanitized.rsplit(NAMESPACE_SEPARATOR, 1)[0]
