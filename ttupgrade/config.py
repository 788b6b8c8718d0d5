"""Configuration loading for ttupgrade (.ttupgrade.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

CONFIG_FILENAME = ".ttupgrade.yml"
OUTPUT_CHOICES = ("yaml", "markdown")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class UpgradeConfig:
    """Represents the settings defined in .ttupgrade.yml."""

    root: Path
    verbose: bool = False
    log_file: Optional[Path] = None
    only: Optional[str] = None


def find_config(location: Path) -> Path:
    """Return where .ttupgrade.yml is expected for an input file or directory.

    The file sits next to the info.yaml being upgraded; a directory is searched
    directly.
    """
    location = location.expanduser()
    if location.name == CONFIG_FILENAME:
        return location.resolve()
    directory = location if location.is_dir() else location.parent
    return (directory / CONFIG_FILENAME).resolve()


def load_config(location: Path) -> UpgradeConfig:
    """Load configuration for ``location``, falling back to defaults when absent."""
    config_file = find_config(location)
    root = config_file.parent
    if not config_file.exists():
        return UpgradeConfig(root=root)

    try:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {CONFIG_FILENAME}: {exc}") from exc
    if data is None:
        return UpgradeConfig(root=root)
    if not isinstance(data, Mapping):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    log_file = _text(data.get("log_file"), "log_file")
    output = data.get("output") or {}
    if not isinstance(output, Mapping):
        raise ConfigError("output must be a mapping")
    only = _text(output.get("only"), "output.only")
    if only is not None and only not in OUTPUT_CHOICES:
        raise ConfigError(
            f"output.only must be one of {', '.join(OUTPUT_CHOICES)}, got {only!r}"
        )

    return UpgradeConfig(
        root=root,
        verbose=_flag(data.get("verbose"), "verbose"),
        log_file=root / log_file if log_file else None,
        only=only,
    )


def _text(value: Any, key: str) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be text, got {value!r}")
    return value


def _flag(value: Any, key: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OUTPUT_CHOICES",
    "UpgradeConfig",
    "find_config",
    "load_config",
]
