"""Tests for field models, merging, and serialization."""

from __future__ import annotations

import pytest

from adschema.domain.fields import (
    ALL,
    CheckboxField,
    DateField,
    MultiselectField,
    NumberField,
    SelectField,
    TextField,
    build_field,
    field_to_dict,
    merge_field,
)
from adschema.errors import InvalidFieldDefinition


class TestFieldInvariants:
    def test_select_requires_options(self) -> None:
        with pytest.raises(InvalidFieldDefinition) as exc_info:
            build_field({"type": "select", "name": "size", "label": "Size"})
        assert exc_info.value.field_name == "size"
        assert any("options" in r for r in exc_info.value.reasons)

    def test_select_rejects_empty_options(self) -> None:
        with pytest.raises(InvalidFieldDefinition):
            build_field({"type": "select", "name": "size", "label": "Size", "options": []})

    def test_text_rejects_options(self) -> None:
        with pytest.raises(InvalidFieldDefinition):
            build_field({"type": "text", "name": "brand", "label": "Brand", "options": ["A"]})

    def test_checkbox_rejects_placeholder(self) -> None:
        with pytest.raises(InvalidFieldDefinition):
            build_field(
                {"type": "checkbox", "name": "sensors", "label": "Sensors", "placeholder": "x"}
            )

    def test_number_bounds_ordered(self) -> None:
        with pytest.raises(InvalidFieldDefinition) as exc_info:
            build_field({"type": "number", "name": "year", "label": "Year", "min": 10, "max": 5})
        assert "min (10) must not exceed max (5)" in str(exc_info.value)

    def test_duplicate_options_rejected(self) -> None:
        with pytest.raises(InvalidFieldDefinition):
            build_field(
                {"type": "multiselect", "name": "a", "label": "A", "options": ["x", "y", "x"]}
            )

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(InvalidFieldDefinition):
            build_field({"type": "slider", "name": "a", "label": "A"})

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(InvalidFieldDefinition):
            build_field({"type": "text", "name": "", "label": "A"})

    def test_empty_applies_to_rejected(self) -> None:
        with pytest.raises(InvalidFieldDefinition):
            build_field({"type": "text", "name": "a", "label": "A", "applies_to": []})

    def test_build_dispatches_on_type(self) -> None:
        kinds = {
            "text": TextField,
            "number": NumberField,
            "checkbox": CheckboxField,
            "date": DateField,
        }
        for kind, cls in kinds.items():
            assert isinstance(build_field({"type": kind, "name": "f", "label": "F"}), cls)
        choice = build_field({"type": "multiselect", "name": "f", "label": "F", "options": ["a"]})
        assert isinstance(choice, MultiselectField)

    def test_fields_are_frozen(self) -> None:
        field = TextField(name="brand", label="Brand")
        with pytest.raises(Exception):
            field.label = "Make"  # type: ignore[misc]


class TestApplicability:
    def test_all_matches_any_category(self) -> None:
        field = TextField(name="brand", label="Brand")
        assert field.applies_to == ALL
        assert field.applies_to_category("Anything at all")

    def test_tuple_matches_listed_only(self) -> None:
        field = TextField(name="frameSize", label="Frame Size", applies_to=("Bicycles",))
        assert field.applies_to_category("Bicycles")
        assert not field.applies_to_category("Cars")

    def test_list_coerced_to_tuple(self) -> None:
        field = build_field({"type": "text", "name": "a", "label": "A", "applies_to": ["X"]})
        assert field.applies_to == ("X",)


class TestMergeField:
    def test_override_replaces_named_keys_only(self) -> None:
        base = SelectField(
            name="landType",
            label="Land Type",
            options=("Residential", "Commercial"),
            placeholder="Pick one",
        )
        merged = merge_field(base, {"label": "Property Type", "options": ("Studio", "1BHK")})
        assert merged.label == "Property Type"
        assert merged.options == ("Studio", "1BHK")
        assert merged.name == "landType"
        assert merged.placeholder == "Pick one"
        assert merged.required is False

    def test_base_is_not_mutated(self) -> None:
        base = SelectField(name="a", label="A", options=("x",))
        merge_field(base, {"label": "B", "required": True})
        assert base.label == "A"
        assert base.required is False

    def test_empty_override_returns_base(self) -> None:
        base = TextField(name="a", label="A")
        assert merge_field(base, {}) is base
        assert merge_field(base) is base

    def test_override_can_change_kind(self) -> None:
        base = TextField(name="a", label="A")
        merged = merge_field(base, {"type": "select", "options": ("x", "y")})
        assert isinstance(merged, SelectField)

    def test_merge_that_breaks_invariants_raises(self) -> None:
        base = SelectField(name="a", label="A", options=("x",))
        with pytest.raises(InvalidFieldDefinition) as exc_info:
            merge_field(base, {"type": "text"})
        assert exc_info.value.field_name == "a"

    def test_copy_with(self) -> None:
        base = NumberField(name="year", label="Year", min=1980, max=2030)
        narrowed = base.copy_with(applies_to=("Cars",), required=True)
        assert narrowed.applies_to == ("Cars",)
        assert narrowed.required is True
        assert narrowed.min == 1980


class TestFieldToDict:
    def test_omits_unset_optionals(self) -> None:
        data = field_to_dict(TextField(name="brand", label="Brand", required=True))
        assert data == {
            "name": "brand",
            "label": "Brand",
            "required": True,
            "applies_to": "all",
            "type": "text",
        }

    def test_options_serialize_as_list(self) -> None:
        data = field_to_dict(SelectField(name="a", label="A", options=("x", "y")))
        assert data["options"] == ["x", "y"]

    def test_round_trips_through_build(self) -> None:
        field = NumberField(name="n", label="N", min=0, applies_to=("Cars",))
        assert build_field(field_to_dict(field)) == field
