"""Subcategory override registry.

Populated once at import from the per-template override modules. Keys are
leaf category names; the registry is read-only afterwards.
"""

from __future__ import annotations

from types import MappingProxyType

from adschema.domain.overrides import SubcategoryOverride
from adschema.domain.subcategories.electronics import ELECTRONICS_SUBCATEGORIES
from adschema.domain.subcategories.general import GENERAL_SUBCATEGORIES
from adschema.domain.subcategories.property import PROPERTY_SUBCATEGORIES
from adschema.domain.subcategories.services import SERVICES_SUBCATEGORIES

ALL_SUBCATEGORIES: tuple[SubcategoryOverride, ...] = (
    *ELECTRONICS_SUBCATEGORIES,
    *PROPERTY_SUBCATEGORIES,
    *SERVICES_SUBCATEGORIES,
    *GENERAL_SUBCATEGORIES,
)


def _build_registry() -> MappingProxyType[str, SubcategoryOverride]:
    """Index :data:`ALL_SUBCATEGORIES` by leaf name, refusing duplicates."""
    registry: dict[str, SubcategoryOverride] = {}
    for override in ALL_SUBCATEGORIES:
        if override.name in registry:
            raise ValueError(f"Duplicate subcategory override: {override.name!r}")
        registry[override.name] = override
    return MappingProxyType(registry)


SUBCATEGORY_OVERRIDES = _build_registry()


def get_override(leaf_category: str) -> SubcategoryOverride | None:
    """Override set for *leaf_category*, or None when the template applies."""
    return SUBCATEGORY_OVERRIDES.get(leaf_category)


def list_overrides(template: str | None = None) -> list[SubcategoryOverride]:
    """Registered override sets, optionally restricted to one template."""
    if template is None:
        return list(ALL_SUBCATEGORIES)
    return [o for o in ALL_SUBCATEGORIES if o.template == template]
