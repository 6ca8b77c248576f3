"""Loads YAML/JSON configuration files and global meta settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PACKAGE_ROOT: Path = Path(__file__).resolve().parents[2]


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package's meta configuration."""
    if path is None:
        path = PACKAGE_ROOT / "configs" / "meta_config.yaml"
    if path.exists():
        return load_config(path)
    return {}


def _resolve_dir(value: str | Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = PACKAGE_ROOT / path
    return path


META_CONFIG: Dict[str, Any] = load_meta_config()
RESOURCE_DIR: Path = _resolve_dir(META_CONFIG.get("resource_dir", "resources"))
RESOURCE_SUFFIX: str = str(META_CONFIG.get("resource_suffix", ".txt"))
LOG_LEVEL: str = str(META_CONFIG.get("log_level", "INFO")).upper()
LOG_FILE: Optional[str] = META_CONFIG.get("log_file") or None


def set_resource_dir(value: str | Path) -> None:
    """Override the directory named resources are read from."""
    global RESOURCE_DIR
    RESOURCE_DIR = _resolve_dir(value)
    META_CONFIG["resource_dir"] = str(value)


def set_resource_suffix(value: str) -> None:
    """Override the suffix appended to bare resource names."""
    global RESOURCE_SUFFIX
    RESOURCE_SUFFIX = value
    META_CONFIG["resource_suffix"] = value


def set_log_level(value: str) -> None:
    """Override the logging level, including already created package loggers."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    META_CONFIG["log_level"] = LOG_LEVEL
    for name, existing in list(logging.root.manager.loggerDict.items()):
        if name.split(".")[0] == "euler_grid" and isinstance(existing, logging.Logger):
            existing.setLevel(LOG_LEVEL)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "resource_dir": RESOURCE_DIR,
        "resource_suffix": RESOURCE_SUFFIX,
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE or "-",
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
