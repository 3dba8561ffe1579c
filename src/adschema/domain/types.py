"""Classification enum for the attribute templates."""

from __future__ import annotations

from enum import StrEnum


class TemplateName(StrEnum):
    """The seven canonical attribute templates."""

    ELECTRONICS = "electronics"
    VEHICLES = "vehicles"
    PROPERTY = "property"
    FASHION = "fashion"
    PETS = "pets"
    SERVICES = "services"
    GENERAL = "general"
