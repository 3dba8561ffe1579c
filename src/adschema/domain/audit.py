"""Whole-catalog consistency audit.

Walks every template and override set and reports configuration problems.
Errors mean the static configuration is broken; warnings flag overrides
that change nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from adschema.domain.overrides import SubcategoryOverride
from adschema.domain.subcategories import list_overrides
from adschema.domain.templates import list_templates
from adschema.errors import InvalidFieldDefinition


@dataclass(frozen=True)
class CatalogIssue:
    """One problem found in the static catalog."""

    category: str
    severity: str
    subject: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "category": self.category,
            "severity": self.severity,
            "subject": self.subject,
            "message": self.message,
        }


def _duplicates(names: list[str]) -> list[str]:
    return sorted({n for n in names if names.count(n) > 1})


def _audit_override(override: SubcategoryOverride) -> list[CatalogIssue]:
    issues: list[CatalogIssue] = []
    merged_names: list[str] = []

    for position, item in enumerate(override.entries):
        try:
            merged = item.merged()
        except InvalidFieldDefinition as exc:
            issues.append(
                CatalogIssue("invalid_field", "error", override.name, f"entry {position}: {exc}")
            )
            merged_names.append(item.field.name)
            continue
        merged_names.append(merged.name)

        base = item.field.model_dump()
        redundant = sorted(k for k, v in item.override.items() if k in base and base[k] == v)
        if redundant:
            issues.append(
                CatalogIssue(
                    "redundant_override",
                    "warning",
                    override.name,
                    f"override on '{item.field.name}' repeats base values: {redundant}",
                )
            )

    for name in _duplicates(merged_names):
        issues.append(
            CatalogIssue("duplicate_field", "error", override.name, f"field '{name}' listed twice")
        )
    return issues


def audit_catalog() -> list[CatalogIssue]:
    """Audit all templates and override sets."""
    issues: list[CatalogIssue] = []
    for template in list_templates():
        for name in _duplicates(template.field_names()):
            issues.append(
                CatalogIssue(
                    "duplicate_field",
                    "error",
                    str(template.name),
                    f"field '{name}' listed twice",
                )
            )
    for override in list_overrides():
        issues.extend(_audit_override(override))
    return issues
