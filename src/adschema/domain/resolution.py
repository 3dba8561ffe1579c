"""Resolution engine — ``(template, leaf category) -> ordered fields``.

Two tiers, most specific wins:

1. A subcategory override set for the leaf is authoritative. Its merged
   entries are returned in declared order and nothing else is added.
2. Otherwise the template's fields are filtered by applicability
   (``"all"`` or the leaf listed), keeping template order.

Resolution only reads the static catalog and returns a fresh tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from adschema.domain.categories import resolve_template_name
from adschema.domain.fields import AdField
from adschema.domain.subcategories import get_override
from adschema.domain.templates import get_template
from adschema.domain.types import TemplateName


@dataclass(frozen=True)
class Resolution:
    """Resolved field list plus where it came from."""

    template: TemplateName
    leaf_category: str
    source: Literal["override", "template"]
    fields: tuple[AdField, ...]


def resolve(template_name: str, leaf_category: str) -> Resolution:
    """Resolve fields for *leaf_category* under *template_name*.

    Raises:
        UnknownTemplate: if *template_name* is not a canonical template. An
            unknown leaf category is not an error.
    """
    template = get_template(template_name)
    override = get_override(leaf_category)
    if override is not None:
        return Resolution(template.name, leaf_category, "override", override.resolve())
    fields = tuple(f for f in template.fields if f.applies_to_category(leaf_category))
    return Resolution(template.name, leaf_category, "template", fields)


def resolve_fields(template_name: str, leaf_category: str) -> tuple[AdField, ...]:
    """Final ordered field list for *leaf_category* under *template_name*."""
    return resolve(template_name, leaf_category).fields


def resolve_for_category(top_level_category: str, leaf_category: str) -> Resolution:
    """Map the top-level category to its template, then resolve the leaf."""
    return resolve(resolve_template_name(top_level_category), leaf_category)
