"""Parsing and validation of v4 info.yaml documents."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping

import yaml

from .constants import (
    SOURCE_YAML_VERSION,
    TOP_MODULE_PREFIX,
    WOKWI_TOP_MODULE_PREFIX,
)
from .errors import (
    InvalidFieldError,
    MissingFieldError,
    MissingSectionError,
    ParseError,
    VersionError,
)
from .logging import get_logger
from .models import ProjectInfo
from .pins import parse_pin_entries
from .scalars import display_text, is_absent, scalar_text

logger = get_logger("loader")

_CORE_INT_PATTERN = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
_CORE_FLOAT_PATTERN = re.compile(
    r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$"
)
_CORE_BOOL_PATTERN = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
_YAML11_ONLY_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader that resolves plain scalars with the YAML 1.2 core schema.

    ``on``/``off``/``yes``/``no`` stay text, ``0123`` is decimal, ``1e7`` is a
    float and dates stay text.
    """

    yaml_implicit_resolvers = {
        first: [(tag, pattern) for tag, pattern in resolvers if tag not in _YAML11_ONLY_TAGS]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


def _construct_core_int(loader: CoreSchemaLoader, node: yaml.ScalarNode) -> int:
    value = loader.construct_scalar(node)
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value)


CoreSchemaLoader.add_implicit_resolver("tag:yaml.org,2002:bool", _CORE_BOOL_PATTERN, list("tTfF"))
# ints before floats: resolvers are tried in registration order
CoreSchemaLoader.add_implicit_resolver("tag:yaml.org,2002:int", _CORE_INT_PATTERN, list("-+0123456789"))
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float", _CORE_FLOAT_PATTERN, list("-+0123456789.")
)
CoreSchemaLoader.add_constructor("tag:yaml.org,2002:int", _construct_core_int)


def parse_info_yaml(text: str) -> Any:
    """Parse raw info.yaml text.

    Integers become Python ints, so Wokwi project IDs keep full precision no
    matter how many digits they have.
    """
    try:
        return yaml.load(text, Loader=CoreSchemaLoader)
    except yaml.YAMLError as exc:
        raise ParseError(str(exc)) from exc


def load_project_info(text: str) -> ProjectInfo:
    """Parse, validate and normalise a v4 info.yaml into a :class:`ProjectInfo`.

    Checks run in a fixed order and the first failing one raises.
    """
    data = _as_dict(parse_info_yaml(text))

    version = display_text(data["yaml_version"]) if "yaml_version" in data else None
    if version != str(SOURCE_YAML_VERSION):
        raise VersionError(version, SOURCE_YAML_VERSION)

    project_section = data.get("project")
    if is_absent(project_section):
        raise MissingSectionError("project")
    documentation_section = data.get("documentation")
    if is_absent(documentation_section):
        raise MissingSectionError("documentation")
    project = _as_dict(project_section)
    documentation = _as_dict(documentation_section)

    tiles = project.get("tiles")
    if is_absent(tiles):
        raise MissingFieldError("project.tiles")
    title = documentation.get("title")
    if is_absent(title):
        raise MissingFieldError("documentation.title")
    author = documentation.get("author")
    if is_absent(author):
        raise MissingFieldError("documentation.author")

    wokwi_id = scalar_text(project.get("wokwi_id"))
    raw_top_module = project.get("top_module")
    top_module_name = None if is_absent(raw_top_module) else display_text(raw_top_module)
    is_wokwi = bool(wokwi_id) and wokwi_id != "0"

    if not is_wokwi and not top_module_name:
        raise MissingFieldError(("project.wokwi_id", "project.top_module"))

    if top_module_name and not top_module_name.startswith(TOP_MODULE_PREFIX):
        raise InvalidFieldError("project.top_module", top_module_name, TOP_MODULE_PREFIX)

    top_module = f"{WOKWI_TOP_MODULE_PREFIX}{wokwi_id}" if is_wokwi else top_module_name
    logger.debug(
        "Loaded %s project with top module %s",
        "Wokwi" if is_wokwi else "HDL",
        top_module,
    )

    external_hw = documentation.get("external_hw")

    return ProjectInfo(
        title=title,
        author=author,
        tiles=tiles,
        top_module=top_module,
        wokwi_id=wokwi_id if is_wokwi else None,
        discord=_default(documentation.get("discord"), ""),
        description=_default(documentation.get("description"), ""),
        language=_default(documentation.get("language"), ""),
        clock_hz=_default(documentation.get("clock_hz"), 0),
        source_files=_as_list(project.get("source_files")),
        external_hw="" if is_absent(external_hw) else display_text(external_hw),
        how_it_works=documentation["how_it_works"].strip(),
        how_to_test=documentation["how_to_test"].strip(),
        inputs=parse_pin_entries(documentation.get("inputs")),
        outputs=parse_pin_entries(documentation.get("outputs")),
        bidirectional=parse_pin_entries(documentation.get("bidirectional")),
    )


def _as_dict(value: Any) -> Dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


__all__ = ["load_project_info", "parse_info_yaml"]
