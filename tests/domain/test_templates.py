"""Tests for the template catalog."""

from __future__ import annotations

import pytest

from adschema.domain.fields import TextField
from adschema.domain.templates import (
    PROPERTY,
    SERVICES,
    TEMPLATES,
    VEHICLES,
    Template,
    get_template,
    list_templates,
)
from adschema.domain.types import TemplateName
from adschema.errors import UnknownTemplate


class TestCatalog:
    def test_seven_canonical_templates(self) -> None:
        assert [t.name for t in list_templates()] == list(TemplateName)
        assert set(TEMPLATES) == {
            "electronics",
            "vehicles",
            "property",
            "fashion",
            "pets",
            "services",
            "general",
        }

    def test_get_template(self) -> None:
        assert get_template("vehicles") is VEHICLES

    def test_unknown_template_raises(self) -> None:
        with pytest.raises(UnknownTemplate) as exc_info:
            get_template("boats")
        assert exc_info.value.name == "boats"
        assert "boats" in str(exc_info.value)

    def test_unknown_template_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_template("boats")

    def test_catalog_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            TEMPLATES["boats"] = VEHICLES  # type: ignore[index]

    @pytest.mark.parametrize("template", list_templates(), ids=lambda t: str(t.name))
    def test_field_names_unique(self, template: Template) -> None:
        names = template.field_names()
        assert len(names) == len(set(names))

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValueError):
            Template(
                name=TemplateName.GENERAL,
                label="General",
                icon="x",
                fields=(TextField(name="a", label="A"), TextField(name="a", label="B")),
            )


class TestTemplateContents:
    def test_vehicles_bicycle_fields_scoped(self) -> None:
        fields = {f.name: f for f in VEHICLES.fields}
        assert fields["bicycleType"].applies_to == ("Bicycles",)
        assert fields["frameSize"].applies_to == ("Bicycles",)
        assert "Bicycles" not in fields["fuelType"].applies_to
        assert "Bicycles" not in fields["transmission"].applies_to

    def test_vehicles_condition_has_reconditioned(self) -> None:
        condition = VEHICLES.fields[0]
        assert condition.name == "condition"
        assert "Reconditioned" in condition.options  # type: ignore[union-attr]

    def test_property_rent_fields_scoped_to_rentals(self) -> None:
        rent = next(f for f in PROPERTY.fields if f.name == "monthlyRent")
        assert "Apartments for Rent" in rent.applies_to
        assert "Apartments for Sale" not in rent.applies_to

    def test_services_company_name_optional(self) -> None:
        company = next(f for f in SERVICES.fields if f.name == "companyName")
        assert company.required is False
