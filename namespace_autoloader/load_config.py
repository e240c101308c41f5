"""Logic for loading autoloader options from YAML and merging defaults."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from namespace_autoloader.autoloader_config import AutoloaderConfig
from namespace_autoloader.errors import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "directory": None,
    "namespace_prefix": None,
    "force_to_lowercase": False,
    "classes_dir": "",
}


def load_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> AutoloaderConfig:
    """Load options from a YAML file, apply overrides and validate them.

    Precedence is defaults < file < overrides. Overrides whose value is None
    are treated as not given.
    """
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file must contain a mapping: {p}"
                raise ConfigurationError(msg)
            config.update(user_config)
    if overrides:
        config.update({k: v for k, v in overrides.items() if v is not None})
    return AutoloaderConfig.from_args(config)
