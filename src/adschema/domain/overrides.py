"""Subcategory override models.

An override set names a leaf category and lists the fields to show for it,
each optionally patched by a shallow override. When a leaf has an override
set, that list replaces the template's generic selection outright.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from adschema.domain.fields import AdField, merge_field
from adschema.domain.types import TemplateName


class OverrideEntry(BaseModel):
    """One field of an override set plus the attributes it replaces."""

    model_config = {"frozen": True}

    field: AdField
    override: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("override", mode="after")
    @classmethod
    def _freeze(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        # Lists become tuples; the catalog is read-only
        return MappingProxyType(
            {k: tuple(v) if isinstance(v, list) else v for k, v in value.items()}
        )

    @field_serializer("override")
    def _dump_override(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def merged(self) -> AdField:
        """``{**field, **override}`` re-validated as a field.

        Raises:
            InvalidFieldDefinition: if the merge breaks the field invariants.
        """
        return merge_field(self.field, self.override)


class SubcategoryOverride(BaseModel):
    """Authoritative field list for one leaf category."""

    model_config = {"frozen": True}

    name: str
    template: TemplateName
    entries: tuple[OverrideEntry, ...]

    def resolve(self) -> tuple[AdField, ...]:
        """Merged fields in declared order."""
        return tuple(e.merged() for e in self.entries)


def entry(field: AdField, **override: Any) -> OverrideEntry:
    """Shorthand for :class:`OverrideEntry` with keyword overrides."""
    return OverrideEntry(field=field, override=override)


def subcategory(template: TemplateName, name: str, *entries: OverrideEntry) -> SubcategoryOverride:
    """Build an override set for leaf *name* narrowing *template*."""
    return SubcategoryOverride(name=name, template=template, entries=entries)
