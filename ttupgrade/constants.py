"""Shared constants for info.yaml upgrades."""

from __future__ import annotations

SOURCE_YAML_VERSION = 4
TARGET_YAML_VERSION = 6

TOP_MODULE_PREFIX = "tt_um_"
WOKWI_TOP_MODULE_PREFIX = "tt_um_wokwi_"

UNUSED_PIN_LABELS: tuple[str, ...] = ("none", "unused", "not used")

PIN_COUNT = 8

# (documentation key, pin name prefix, pinout heading) in v6 pinout order
PIN_GROUPS: tuple[tuple[str, str, str], ...] = (
    ("inputs", "ui", "Inputs"),
    ("outputs", "uo", "Outputs"),
    ("bidirectional", "uio", "Bidirectional pins"),
)


__all__ = [
    "PIN_COUNT",
    "PIN_GROUPS",
    "SOURCE_YAML_VERSION",
    "TARGET_YAML_VERSION",
    "TOP_MODULE_PREFIX",
    "UNUSED_PIN_LABELS",
    "WOKWI_TOP_MODULE_PREFIX",
]
