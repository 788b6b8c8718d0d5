"""Tests for ttupgrade.loader validation and defaulting."""

from __future__ import annotations

import pytest

from tests._fixtures.info_builder import InfoYamlBuilder
from ttupgrade.errors import (
    InvalidFieldError,
    MissingFieldError,
    MissingSectionError,
    ParseError,
    VersionError,
)
from ttupgrade.loader import load_project_info, parse_info_yaml
from ttupgrade.models import NamedPin

DELETE = InfoYamlBuilder.DELETE


def test_parse_info_yaml_keeps_big_integers_exact() -> None:
    data = parse_info_yaml("project:\n  wokwi_id: 123456789012345678901\n")
    assert data["project"]["wokwi_id"] == 123456789012345678901


def test_parse_error_carries_parser_message() -> None:
    with pytest.raises(ParseError) as excinfo:
        load_project_info("project: [unclosed\n")
    assert str(excinfo.value).startswith("Failed to parse info.yaml: ")
    assert excinfo.value.detail
    assert excinfo.value.kind == "ParseError"


def test_wrong_version_reports_found_and_expected(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(VersionError) as excinfo:
        load_project_info(info_builder.top_level(yaml_version=3).build())
    assert excinfo.value.found == "3"
    assert excinfo.value.expected == 4
    assert str(excinfo.value) == "Incorrect 'yaml_version' in info.yaml: found 3, expected 4"


def test_missing_version_is_reported(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(VersionError) as excinfo:
        load_project_info(info_builder.top_level(yaml_version=DELETE).build())
    assert excinfo.value.found is None
    assert "found undefined, expected 4" in str(excinfo.value)


def test_null_version_is_reported_as_null(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(VersionError) as excinfo:
        load_project_info(info_builder.top_level(yaml_version=None).build())
    assert excinfo.value.found == "null"
    assert "found null, expected 4" in str(excinfo.value)


def test_version_is_compared_as_text(info_builder: InfoYamlBuilder) -> None:
    info = load_project_info(info_builder.top_level(yaml_version="4").build())
    assert info.top_module == "tt_um_foo_bar"


@pytest.mark.parametrize("text", ["", "# Paste your info.yaml content here\n", "- a\n- b\n"])
def test_non_mapping_documents_fail_version_check(text: str) -> None:
    with pytest.raises(VersionError):
        load_project_info(text)


@pytest.mark.parametrize("section", ["project", "documentation"])
def test_missing_section(info_builder: InfoYamlBuilder, section: str) -> None:
    with pytest.raises(MissingSectionError) as excinfo:
        load_project_info(info_builder.top_level(**{section: DELETE}).build())
    assert excinfo.value.section == section
    assert str(excinfo.value) == f"Missing '{section}' section in info.yaml"


def test_project_section_checked_before_documentation(info_builder: InfoYamlBuilder) -> None:
    text = info_builder.top_level(project=DELETE, documentation=DELETE).build()
    with pytest.raises(MissingSectionError) as excinfo:
        load_project_info(text)
    assert excinfo.value.section == "project"


@pytest.mark.parametrize(
    ("section", "field"),
    [
        ("project", "tiles"),
        ("documentation", "title"),
        ("documentation", "author"),
    ],
)
def test_missing_required_field(info_builder: InfoYamlBuilder, section: str, field: str) -> None:
    getattr(info_builder, section)(**{field: DELETE})
    with pytest.raises(MissingFieldError) as excinfo:
        load_project_info(info_builder.build())
    assert excinfo.value.fields == (f"{section}.{field}",)
    assert str(excinfo.value) == f"Missing '{section}.{field}' section in info.yaml"


def test_empty_required_field_counts_as_missing(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(MissingFieldError):
        load_project_info(info_builder.documentation(author="").build())


def test_tiles_checked_before_title(info_builder: InfoYamlBuilder) -> None:
    text = info_builder.project(tiles=DELETE).documentation(title=DELETE).build()
    with pytest.raises(MissingFieldError) as excinfo:
        load_project_info(text)
    assert excinfo.value.fields == ("project.tiles",)


def test_hdl_project_requires_top_module(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        load_project_info(info_builder.project(top_module=DELETE).build())
    assert excinfo.value.fields == ("project.wokwi_id", "project.top_module")
    assert str(excinfo.value) == (
        "Missing 'project.wokwi_id' or 'project.top_module' section in info.yaml"
    )


def test_top_module_prefix_is_enforced(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(InvalidFieldError) as excinfo:
        load_project_info(info_builder.project(top_module="bad_name").build())
    assert excinfo.value.value == "bad_name"
    assert excinfo.value.prefix == "tt_um_"
    assert str(excinfo.value) == (
        "Invalid value for 'project.top_module' in info.yaml: got \"bad_name\", "
        "expected a name starting with \"tt_um_\""
    )


def test_literal_top_module_checked_even_for_wokwi(info_builder: InfoYamlBuilder) -> None:
    text = info_builder.project(wokwi_id=42, top_module="bad_name").build()
    with pytest.raises(InvalidFieldError) as excinfo:
        load_project_info(text)
    assert excinfo.value.value == "bad_name"


def test_wokwi_project_synthesizes_top_module(info_builder: InfoYamlBuilder) -> None:
    text = info_builder.project(wokwi_id=123456789012345678, top_module=DELETE).build()
    info = load_project_info(text)
    assert info.is_wokwi
    assert info.wokwi_id == "123456789012345678"
    assert info.top_module == "tt_um_wokwi_123456789012345678"


@pytest.mark.parametrize("wokwi_id", [0, "0", None, DELETE])
def test_zero_or_absent_wokwi_id_is_hdl(info_builder: InfoYamlBuilder, wokwi_id: object) -> None:
    info = load_project_info(info_builder.project(wokwi_id=wokwi_id).build())
    assert not info.is_wokwi
    assert info.wokwi_id is None
    assert info.top_module == "tt_um_foo_bar"


def test_optional_fields_get_defaults(info_builder: InfoYamlBuilder) -> None:
    text = (
        info_builder.project(source_files=DELETE)
        .documentation(
            language=DELETE,
            description=DELETE,
            inputs=DELETE,
            outputs=DELETE,
            bidirectional=DELETE,
        )
        .build()
    )
    info = load_project_info(text)
    assert info.discord == ""
    assert info.description == ""
    assert info.language == ""
    assert info.clock_hz == 0
    assert info.source_files == []
    assert info.external_hw == ""
    assert info.inputs == []


def test_long_form_fields_are_trimmed(info_builder: InfoYamlBuilder) -> None:
    text = info_builder.documentation(how_it_works="\n  It works.\n\n", how_to_test=" Test it.\n").build()
    info = load_project_info(text)
    assert info.how_it_works == "It works."
    assert info.how_to_test == "Test it."


def test_missing_long_form_field_is_not_a_migration_error(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(KeyError):
        load_project_info(info_builder.documentation(how_to_test=DELETE).build())


def test_pin_sequences_are_resolved(info_builder: InfoYamlBuilder) -> None:
    text = info_builder.documentation(outputs=[{"led": "status LED"}, "not used"]).build()
    info = load_project_info(text)
    assert info.outputs[0] == NamedPin(name="led", description="status LED")
    assert info.pinout("outputs")[:2] == ["led: status LED", ""]


def test_empty_project_mapping_reports_missing_tiles(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        load_project_info(info_builder.top_level(project={}).build())
    assert excinfo.value.fields == ("project.tiles",)


def test_empty_documentation_mapping_reports_missing_title(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        load_project_info(info_builder.top_level(documentation={}).build())
    assert excinfo.value.fields == ("documentation.title",)


def test_list_section_counts_as_present(info_builder: InfoYamlBuilder) -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        load_project_info(info_builder.top_level(project=[]).build())
    assert excinfo.value.fields == ("project.tiles",)


@pytest.mark.parametrize("tiles", [None, "", 0, False])
def test_blank_tiles_count_as_missing(info_builder: InfoYamlBuilder, tiles: object) -> None:
    with pytest.raises(MissingFieldError):
        load_project_info(info_builder.project(tiles=tiles).build())


_PLAIN_SCALARS_V4 = """\
project:
  wokwi_id: 0
  top_module: "tt_um_plain"
  tiles: 1x1
yaml_version: 4
documentation:
  title: on
  author: yes
  description: no
  language: off
  clock_hz: 1e7
  external_hw: 2024-03-01
  how_it_works: works
  how_to_test: test
  inputs: [on, off, yes, no, true, False, 0123, 0o17]
  outputs: [0x1F, .inf, 1.5, null]
"""


def test_yes_no_on_off_stay_text() -> None:
    info = load_project_info(_PLAIN_SCALARS_V4)
    assert info.title == "on"
    assert info.author == "yes"
    assert info.description == "no"
    assert info.language == "off"
    assert info.pinout("inputs")[:6] == ["on", "off", "yes", "no", "true", ""]


def test_core_schema_numbers() -> None:
    info = load_project_info(_PLAIN_SCALARS_V4)
    assert info.clock_hz == 10_000_000.0
    assert info.pinout("inputs")[6:] == ["123", "15"]
    assert info.pinout("outputs")[:4] == ["31", "inf", "1.5", ""]


def test_dates_stay_text() -> None:
    info = load_project_info(_PLAIN_SCALARS_V4)
    assert info.external_hw == "2024-03-01"


def test_parse_info_yaml_uses_core_schema() -> None:
    data = parse_info_yaml("a: yes\nb: 0123\nc: 1e7\nd: 0x10\ne: TRUE\n")
    assert data == {"a": "yes", "b": 123, "c": 1e7, "d": 16, "e": True}
