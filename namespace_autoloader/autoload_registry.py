"""Host-side class table and autoload chain that resolvers register with."""

import hashlib
import importlib.util
import logging
import sys
import threading
from collections.abc import Callable
from pathlib import Path
from types import ModuleType

from namespace_autoloader.errors import (
    AutoloaderError,
    ClassNotFoundError,
    DuplicateClassError,
)
from namespace_autoloader.sanitizer import NAMESPACE_SEPARATOR, sanitize_namespace

logger = logging.getLogger(__name__)

AutoloadCallback = Callable[[str], object]

MODULE_NAME_PREFIX = "_autoloaded_"


class AutoloadRegistry:
    """Defined classes, included files and the ordered chain of autoloaders.

    The caller owns the registry and passes it to resolvers; nothing here is
    process-global apart from the ``sys.modules`` entries of included files.
    """

    def __init__(self) -> None:
        """Create an empty registry with no autoloaders."""
        self._callbacks: list[AutoloadCallback] = []
        self._classes: dict[str, type] = {}  # identifier -> class
        self._included: set[str] = set()  # resolved file paths
        self._lock = threading.RLock()

    @property
    def callbacks(self) -> tuple[AutoloadCallback, ...]:
        """Registered autoloaders in the order they are tried."""
        return tuple(self._callbacks)

    def register(self, callback: AutoloadCallback, *, prepend: bool = False) -> None:
        """Add an autoloader to the end (or, with ``prepend``, the front) of the chain.

        Registering the same callback twice adds it twice.
        """
        with self._lock:
            if prepend:
                self._callbacks.insert(0, callback)
            else:
                self._callbacks.append(callback)

    def unregister(self, callback: AutoloadCallback) -> bool:
        """Remove the first registration of ``callback``; return whether one existed."""
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                return False
            return True

    def is_defined(self, identifier: str) -> bool:
        """Check whether a class is already defined, without autoloading."""
        return sanitize_namespace(identifier) in self._classes

    def define(self, identifier: str, cls: type) -> None:
        """Add a class under its fully-qualified identifier."""
        key = sanitize_namespace(identifier)
        with self._lock:
            existing = self._classes.get(key)
            if existing is not None and existing is not cls:
                raise DuplicateClassError(key)
            self._classes[key] = cls

    def include_once(self, path: str | Path, namespace: str) -> bool:
        """Execute a class file unless it was included before.

        Every top-level class the file defines is added under
        ``<namespace>\\<ClassName>``; a module-level ``__namespace__`` string
        takes precedence over ``namespace``. Errors raised by the file, or a
        clash with an already defined class, propagate without defining
        anything and leave the file eligible for another attempt.
        """
        resolved = str(Path(path).resolve())
        with self._lock:
            if resolved in self._included:
                logger.debug("Already included: %s", resolved)
                return False
            self._included.add(resolved)
            module_name = _module_name(resolved)
            try:
                module = self._execute(module_name, resolved)
                declared = getattr(module, "__namespace__", None)
                self._define_module_classes(
                    module, declared if isinstance(declared, str) else namespace
                )
            except BaseException:
                self._included.discard(resolved)
                sys.modules.pop(module_name, None)
                raise
        logger.debug("Included %s", resolved)
        return True

    def autoload(self, identifier: str) -> None:
        """Run the chain until some autoloader defines ``identifier``."""
        for callback in self.callbacks:
            callback(identifier)
            if self.is_defined(identifier):
                return

    def load_class(self, identifier: str) -> type:
        """Return a class, autoloading it first if needed."""
        key = sanitize_namespace(identifier)
        with self._lock:
            if key not in self._classes:
                logger.debug("Autoloading %s", key)
                self.autoload(key)
            try:
                return self._classes[key]
            except KeyError:
                raise ClassNotFoundError(key) from None

    def _execute(self, module_name: str, resolved: str) -> ModuleType:
        spec = importlib.util.spec_from_file_location(module_name, resolved)
        if spec is None or spec.loader is None:
            msg = f"Could not load spec from {resolved}"
            raise AutoloaderError(msg)

        module = importlib.util.module_from_spec(spec)
        # Class files resolve their dependencies through the same registry
        module.load_class = self.load_class  # type: ignore[attr-defined]
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
        return module

    def _define_module_classes(self, module: ModuleType, namespace: str) -> None:
        prefix = sanitize_namespace(namespace)
        found: dict[str, type] = {}
        for name, obj in vars(module).items():
            if (
                isinstance(obj, type)
                and obj.__module__ == module.__name__
                and obj.__qualname__ == name
            ):
                identifier = f"{prefix}{NAMESPACE_SEPARATOR}{name}" if prefix else name
                found[identifier] = obj

        # All or nothing: a clash leaves no class of this file defined
        for identifier, obj in found.items():
            existing = self._classes.get(identifier)
            if existing is not None and existing is not obj:
                raise DuplicateClassError(identifier)
        self._classes.update(found)


def _module_name(resolved: str) -> str:
    digest = hashlib.sha256(resolved.encode("utf-8")).hexdigest()[:12]
    return f"{MODULE_NAME_PREFIX}{digest}"
