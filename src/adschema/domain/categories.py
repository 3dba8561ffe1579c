"""Category-to-template map.

Keyed by the top-level (parent) category only: every leaf under one parent
resolves to the same template. Per-leaf differentiation happens in the
subcategory overrides.
"""

from __future__ import annotations

from types import MappingProxyType

from adschema.domain.types import TemplateName

DEFAULT_TEMPLATE = TemplateName.GENERAL

CATEGORY_TEMPLATE_MAP: MappingProxyType[str, TemplateName] = MappingProxyType(
    {
        "Mobiles": TemplateName.ELECTRONICS,
        "Electronics": TemplateName.ELECTRONICS,
        "Vehicles": TemplateName.VEHICLES,
        "Property": TemplateName.PROPERTY,
        "Men's Fashion & Grooming": TemplateName.FASHION,
        "Women's Fashion & Beauty": TemplateName.FASHION,
        "Pets & Animals": TemplateName.PETS,
        "Services": TemplateName.SERVICES,
        "Jobs": TemplateName.SERVICES,
        "Education": TemplateName.SERVICES,
        "Overseas Jobs": TemplateName.SERVICES,
        "Home & Living": TemplateName.GENERAL,
        "Hobbies, Sports & Kids": TemplateName.GENERAL,
        "Business & Industry": TemplateName.GENERAL,
        "Essentials": TemplateName.GENERAL,
        "Agriculture": TemplateName.GENERAL,
    }
)


def resolve_template_name(top_level_category: str) -> TemplateName:
    """Template for *top_level_category*; ``general`` when unmapped. Never raises."""
    return CATEGORY_TEMPLATE_MAP.get(top_level_category, DEFAULT_TEMPLATE)


def categories_for_template(template: str) -> list[str]:
    """Top-level categories bound to *template*, in declaration order."""
    return [cat for cat, name in CATEGORY_TEMPLATE_MAP.items() if name == template]
