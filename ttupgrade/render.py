"""Template rendering for the upgraded info.yaml and its datasheet."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .constants import PIN_GROUPS, TARGET_YAML_VERSION
from .models import ProjectInfo
from .scalars import json_literal

TEMPLATES_DIR = Path(__file__).with_name("templates")


def bullet_list(items: Iterable[Any], indent: int = 4) -> str:
    """Render items as YAML list lines, each value JSON-quoted."""
    prefix = " " * indent
    return "\n".join(f"{prefix}- {json_literal(item)}" for item in items)


class InfoRenderer:
    """Renders :class:`ProjectInfo` records through the packaged Jinja templates."""

    INFO_YAML_TEMPLATE = "info.yaml.j2"
    DATASHEET_TEMPLATE = "info.md.j2"

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self._env = self._create_env(self.templates_dir)
        self._pin_groups: List[Dict[str, str]] = [
            {"key": key, "prefix": prefix, "heading": heading}
            for key, prefix, heading in PIN_GROUPS
        ]

    def render_info_yaml(self, info: ProjectInfo) -> str:
        """Render the v6 info.yaml document."""
        template = self._env.get_template(self.INFO_YAML_TEMPLATE)
        return template.render(
            info=info,
            pin_groups=self._pin_groups,
            target_version=TARGET_YAML_VERSION,
        )

    def render_datasheet(self, info: ProjectInfo) -> str:
        """Render the markdown datasheet (docs/info.md)."""
        template = self._env.get_template(self.DATASHEET_TEMPLATE)
        return template.render(info=info)

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters["literal"] = json_literal
        env.filters["bullet_list"] = bullet_list
        return env


__all__ = ["InfoRenderer", "TEMPLATES_DIR", "bullet_list"]
