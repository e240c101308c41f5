"""Validated, read-only options for a namespace autoloader."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any
from urllib.parse import parse_qsl

from namespace_autoloader.errors import ConfigurationError

logger = logging.getLogger(__name__)

TRUE_STRINGS = {"1", "true", "yes", "on"}
FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class AutoloaderConfig:
    """Options controlling where an autoloader looks for class files.

    Attributes:
        directory: Absolute root directory of the project.
        namespace_prefix: Namespace subtree the autoloader owns, e.g. ``Proj``.
        force_to_lowercase: Lowercase the directories derived from the namespace.
        classes_dir: Subdirectory of ``directory`` holding all class files.
    """

    directory: str
    namespace_prefix: str
    force_to_lowercase: bool = False
    classes_dir: str = ""

    def __post_init__(self) -> None:
        """Validate every option once, at construction."""
        if not isinstance(self.directory, str) or not self.directory:
            msg = "'directory' is required"
            raise ConfigurationError(msg)
        if not os.path.isabs(self.directory):
            msg = f"'directory' must be an absolute path, got: {self.directory}"
            raise ConfigurationError(msg)
        if (
            not isinstance(self.namespace_prefix, str)
            or not self.namespace_prefix.strip("\\")
        ):
            msg = "'namespace_prefix' is required"
            raise ConfigurationError(msg)
        if not isinstance(self.classes_dir, str):
            msg = f"'classes_dir' must be a string, got: {self.classes_dir!r}"
            raise ConfigurationError(msg)
        if not isinstance(self.force_to_lowercase, bool):
            msg = (
                "'force_to_lowercase' must be a boolean, "
                f"got: {self.force_to_lowercase!r}"
            )
            raise ConfigurationError(msg)

    @classmethod
    def from_args(cls, args: Mapping[str, Any] | str) -> "AutoloaderConfig":
        """Build a config from a mapping or a ``key=value&...`` query string.

        Missing options fall back to their defaults and unknown keys are
        ignored. Boolean options given as strings accept the usual spellings
        (``true``, ``1``, ``yes``...).
        """
        if isinstance(args, str):
            args = dict(parse_qsl(args, keep_blank_values=True))

        known = {f.name for f in fields(cls)}
        options: dict[str, Any] = {}
        for key, value in args.items():
            if key not in known:
                logger.warning("Ignoring unknown autoloader option: %s", key)
                continue
            options[key] = value

        if "force_to_lowercase" in options:
            options["force_to_lowercase"] = _as_bool(options["force_to_lowercase"])
        if options.get("classes_dir") is None:
            options.pop("classes_dir", None)

        return cls(
            directory=options.pop("directory", None),
            namespace_prefix=options.pop("namespace_prefix", None),
            **options,
        )


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    msg = f"'force_to_lowercase' must be a boolean, got: {value!r}"
    raise ConfigurationError(msg)
