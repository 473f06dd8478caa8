"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from xmldoc_help.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "warnings": {
        "ignore_missing": False,
        "as_errors": False,
        "suppress": [],
    },
    "cache": {
        "enabled": True,
    },
    "crossrefs": {
        "rewrite": True,
    },
}


def load_config(*paths: str | Path) -> dict[str, Any]:
    """Load configuration files in order and merge them over the defaults.

    Later files override earlier ones; `suppress` lists accumulate.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    for path in paths:
        p = Path(path)
        if not p.is_file():
            msg = f"Config file not found: {p}"
            raise ConfigError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            msg = f"Config {p} is not valid YAML: {e}"
            raise ConfigError(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Config {p} must be a mapping, got {type(user_config).__name__}"
            raise ConfigError(msg)
        _merge_into(config, user_config, str(p), "")
        logger.debug("Loaded config from %s", p)
    return config


def _merge_into(
    base: dict[str, Any], update: dict[str, Any], source: str, where: str
) -> None:
    """Merge `update` into `base` in place, checking it against the default shape.

    - Mappings are merged recursively.
    - Lists are additive: a sorted, de-duplicated union of strings.
    - Scalars replace and must match the default's type.
    """
    for key, value in update.items():
        dotted = f"{where}{key}"
        if key not in base:
            msg = f"Config {source}: unknown key '{dotted}'"
            raise ConfigError(msg)
        current = base[key]
        if isinstance(current, dict):
            if not isinstance(value, dict):
                msg = f"Config {source}: '{dotted}' must be a mapping"
                raise ConfigError(msg)
            _merge_into(current, value, source, dotted + ".")
        elif isinstance(current, list):
            names_ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
            if not names_ok:
                msg = f"Config {source}: '{dotted}' must be a list of names"
                raise ConfigError(msg)
            base[key] = sorted(set(current) | set(value))
        else:
            if type(value) is not type(current):
                msg = (
                    f"Config {source}: '{dotted}' must be "
                    f"{type(current).__name__}, got {value!r}"
                )
                raise ConfigError(msg)
            base[key] = value
