"""Core data models shared across ttupgrade components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .constants import PIN_COUNT


@dataclass(frozen=True)
class EmptyPin:
    """A pin left blank or marked unused."""

    @property
    def label(self) -> str:
        return ""


@dataclass(frozen=True)
class NamedPin:
    """A pin described as a ``{name: description}`` mapping."""

    name: str
    description: str

    @property
    def label(self) -> str:
        return f"{self.name}: {self.description}"


@dataclass(frozen=True)
class PlainPin:
    """A pin described by free text."""

    text: str

    @property
    def label(self) -> str:
        return self.text


PinEntry = Union[EmptyPin, NamedPin, PlainPin]


@dataclass
class ProjectInfo:
    """Validated, defaulted view of a v4 info.yaml ready for rendering."""

    title: Any
    author: Any
    tiles: Any
    top_module: str
    how_it_works: str
    how_to_test: str
    wokwi_id: Optional[str] = None
    discord: Any = ""
    description: Any = ""
    language: Any = ""
    clock_hz: Any = 0
    external_hw: str = ""
    source_files: List[Any] = field(default_factory=list)
    inputs: List[PinEntry] = field(default_factory=list)
    outputs: List[PinEntry] = field(default_factory=list)
    bidirectional: List[PinEntry] = field(default_factory=list)

    @property
    def is_wokwi(self) -> bool:
        return bool(self.wokwi_id) and self.wokwi_id != "0"

    def pinout(self, group: str) -> List[str]:
        """Return exactly ``PIN_COUNT`` labels for a pin group."""
        entries: List[PinEntry] = getattr(self, group)
        labels = [entry.label for entry in entries[:PIN_COUNT]]
        labels.extend("" for _ in range(PIN_COUNT - len(labels)))
        return labels


@dataclass(frozen=True)
class MigrationResult:
    """The two documents produced by a successful upgrade."""

    info_yaml: str
    datasheet: str


@dataclass(frozen=True)
class UpgradeOutcome:
    """Boundary result: either both documents or a single error message."""

    info_yaml: str = ""
    datasheet: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
