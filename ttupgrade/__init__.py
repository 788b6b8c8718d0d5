"""Upgrade Tiny Tapeout info.yaml files from version 4 to version 6."""

from .errors import (
    InvalidFieldError,
    MigrationError,
    MissingFieldError,
    MissingSectionError,
    ParseError,
    VersionError,
)
from .migrator import Migrator, migrate, upgrade_project
from .models import MigrationResult, ProjectInfo, UpgradeOutcome

__all__ = [
    "InvalidFieldError",
    "MigrationError",
    "MigrationResult",
    "Migrator",
    "MissingFieldError",
    "MissingSectionError",
    "ParseError",
    "ProjectInfo",
    "UpgradeOutcome",
    "VersionError",
    "migrate",
    "upgrade_project",
]
