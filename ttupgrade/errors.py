"""Errors raised while upgrading an info.yaml document."""

from __future__ import annotations

from typing import Optional, Sequence


class MigrationError(RuntimeError):
    """Base class for every reason an info.yaml cannot be upgraded."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class ParseError(MigrationError):
    """Raised when the input is not valid YAML."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse info.yaml: {detail}")


class VersionError(MigrationError):
    """Raised when ``yaml_version`` is missing or not the supported source version.

    ``found`` is ``None`` when the key is missing and ``"null"`` when it is
    present without a value.
    """

    def __init__(self, found: Optional[str], expected: int) -> None:
        self.found = found
        self.expected = expected
        shown = "undefined" if found is None else found
        super().__init__(
            f"Incorrect 'yaml_version' in info.yaml: found {shown}, expected {expected}"
        )


class MissingSectionError(MigrationError):
    """Raised when a top-level section is absent."""

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"Missing '{section}' section in info.yaml")


class MissingFieldError(MigrationError):
    """Raised when a required field is absent or empty.

    ``fields`` lists every acceptable alternative; the message joins them with "or".
    """

    def __init__(self, fields: str | Sequence[str]) -> None:
        self.fields: tuple[str, ...] = (fields,) if isinstance(fields, str) else tuple(fields)
        names = " or ".join(f"'{name}'" for name in self.fields)
        super().__init__(f"Missing {names} section in info.yaml")


class InvalidFieldError(MigrationError):
    """Raised when a field is present but does not follow the naming rules."""

    def __init__(self, field: str, value: str, prefix: str) -> None:
        self.field = field
        self.value = value
        self.prefix = prefix
        super().__init__(
            f"Invalid value for '{field}' in info.yaml: got \"{value}\", "
            f"expected a name starting with \"{prefix}\""
        )


__all__ = [
    "InvalidFieldError",
    "MigrationError",
    "MissingFieldError",
    "MissingSectionError",
    "ParseError",
    "VersionError",
]
