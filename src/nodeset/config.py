# -------------------------------------
# nodeset CLI configuration
# -------------------------------------
"""
YAML defaults for the nodeset command.

    # ~/.config/nodeset.yml
    separator: ","
    total: true

Lookup order: explicit path, $NODESET_CONFIG, ~/.config/nodeset.yml.
Command-line flags override whatever is loaded here.
"""
import os
from pathlib import Path
from typing import Any

import yaml

__all__ = ["DEFAULTS", "load_config", "clear_cache", "default_path"]


DEFAULTS: dict[str, Any] = {
    "separator": " ",
    "total": False,
}

_TYPES = {
    "separator": str,
    "total": bool,
}

# Module-level cache for parsed config files
_CONFIG_CACHE: dict[str, dict[str, Any]] = {}


def default_path() -> Path | None:
    env = os.environ.get("NODESET_CONFIG")
    if env:
        return Path(env)
    p = Path.home() / ".config" / "nodeset.yml"
    return p if p.is_file() else None


def _read(path: Path) -> dict[str, Any]:
    path_str = str(path.resolve())
    if path_str in _CONFIG_CACHE:
        return _CONFIG_CACHE[path_str]

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"config '{path}' must be a mapping, got {type(data).__name__}")
    for key, value in data.items():
        if key not in _TYPES:
            raise ValueError(f"unknown config key '{key}' in '{path}'")
        if not isinstance(value, _TYPES[key]):
            raise ValueError(f"config key '{key}' must be {_TYPES[key].__name__}, got {value!r}")

    _CONFIG_CACHE[path_str] = data
    return data


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """
    Return DEFAULTS overlaid with the config file, if one is found.

    Raises:
        FileNotFoundError: If an explicit path (or $NODESET_CONFIG) doesn't exist
        yaml.YAMLError: If the file is not valid YAML
        ValueError: On unknown keys or wrongly typed values
    """
    p = Path(path) if path is not None else default_path()
    cfg = dict(DEFAULTS)
    if p is not None:
        cfg.update(_read(p))
    return cfg


def clear_cache():
    """Clear the parsed config cache."""
    _CONFIG_CACHE.clear()
