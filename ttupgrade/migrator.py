"""Upgrade pipeline from v4 info.yaml to v6 info.yaml plus datasheet."""

from __future__ import annotations

import traceback

from .errors import MigrationError
from .loader import load_project_info
from .logging import get_logger
from .models import MigrationResult, UpgradeOutcome
from .render import InfoRenderer


class Migrator:
    """Turns v4 info.yaml text into the v6 document and its markdown datasheet.

    A migrator holds no per-call state, so one instance can serve any number
    of callers.
    """

    def __init__(self, renderer: InfoRenderer | None = None) -> None:
        self.renderer = renderer or InfoRenderer()
        self.logger = get_logger("migrator")

    def migrate(self, text: str) -> MigrationResult:
        """Upgrade ``text``, raising a :class:`MigrationError` on the first failed check."""
        info = load_project_info(text)
        return MigrationResult(
            info_yaml=self.renderer.render_info_yaml(info),
            datasheet=self.renderer.render_datasheet(info),
        )

    def upgrade(self, text: str) -> UpgradeOutcome:
        """Upgrade ``text`` and report failures as text instead of raising."""
        try:
            result = self.migrate(text)
        except MigrationError as exc:
            self.logger.debug("Upgrade rejected (%s): %s", exc.kind, exc)
            return UpgradeOutcome(error=str(exc))
        except Exception:
            self.logger.exception("Unexpected failure while upgrading info.yaml")
            return UpgradeOutcome(error=traceback.format_exc())
        return UpgradeOutcome(info_yaml=result.info_yaml, datasheet=result.datasheet)


_default_migrator: Migrator | None = None


def _get_default_migrator() -> Migrator:
    global _default_migrator
    if _default_migrator is None:
        _default_migrator = Migrator()
    return _default_migrator


def migrate(text: str) -> MigrationResult:
    """Module-level shortcut for :meth:`Migrator.migrate`."""
    return _get_default_migrator().migrate(text)


def upgrade_project(text: str) -> UpgradeOutcome:
    """Module-level shortcut for :meth:`Migrator.upgrade`."""
    return _get_default_migrator().upgrade(text)


__all__ = ["Migrator", "migrate", "upgrade_project"]
