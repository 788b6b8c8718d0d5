"""Pin description parsing for the v6 pinout block."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from .constants import UNUSED_PIN_LABELS
from .models import EmptyPin, NamedPin, PinEntry, PlainPin
from .scalars import display_text, is_absent, scalar_text

_EMPTY = EmptyPin()


def parse_pin_entry(item: Any) -> PinEntry:
    """Resolve one v4 pin description into a pin entry.

    Blank entries and the ``none``/``unused``/``not used`` markers (any case)
    become empty pins, ``{name: description}`` mappings become named pins and
    any other text passes through unchanged.
    """
    if is_absent(item):
        return _EMPTY
    if isinstance(item, Mapping):
        if len(item) != 1:
            raise ValueError(f"Pin description must have a single key, got {dict(item)!r}")
        ((name, description),) = item.items()
        return NamedPin(name=display_text(name), description=display_text(description))
    if isinstance(item, (list, tuple)):
        raise ValueError(f"Pin description must be text, got a list: {item!r}")
    text = scalar_text(item) or ""
    if text.lower() in UNUSED_PIN_LABELS:
        return _EMPTY
    return PlainPin(text=text)


def parse_pin_entries(items: Optional[Iterable[Any]]) -> List[PinEntry]:
    """Resolve a whole pin description sequence; ``None`` yields no entries."""
    if items is None:
        return []
    if isinstance(items, (str, bytes, Mapping)):
        raise ValueError(f"Pin descriptions must be a list, got {items!r}")
    return [parse_pin_entry(item) for item in items]


__all__ = ["parse_pin_entries", "parse_pin_entry"]
