"""Exception hierarchy for configuration-shape errors.

Submission problems are never raised: they are returned as data by
:func:`adschema.domain.validation.validate_submission`.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for errors in the static schema configuration."""


class UnknownTemplate(SchemaError, KeyError):
    """Requested template name is not one of the canonical templates."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown template: {self.name!r}"


class InvalidFieldDefinition(SchemaError, ValueError):
    """A field (usually after an override merge) breaks the field invariants."""

    def __init__(self, field_name: str, reasons: list[str]) -> None:
        super().__init__(field_name, reasons)
        self.field_name = field_name
        self.reasons = reasons

    def __str__(self) -> str:
        return f"Invalid definition for field {self.field_name!r}: {'; '.join(self.reasons)}"
