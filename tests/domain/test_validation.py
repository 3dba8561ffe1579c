"""Tests for the submission validator."""

from __future__ import annotations

from datetime import date

import pytest

from adschema.domain.fields import (
    CheckboxField,
    DateField,
    MultiselectField,
    NumberField,
    SelectField,
    TextField,
)
from adschema.domain.resolution import resolve_fields
from adschema.domain.validation import (
    CHOICE,
    RANGE,
    REQUIRED,
    TYPE,
    FieldViolation,
    SubmissionValidation,
    parse_form_values,
    validate_submission,
)

BRAND = TextField(name="brand", label="Brand", required=True)
YEAR = NumberField(name="year", label="Year", required=True, min=1980, max=2030)
CONDITION = SelectField(
    name="condition", label="Condition", required=True, options=("New", "Used")
)
AMENITIES = MultiselectField(name="amenities", label="Amenities", options=("Gym", "Pool", "Lift"))
SENSORS = CheckboxField(name="sensors", label="Parking Sensors")
EXPIRY = DateField(name="expiry", label="Expiry Date")


def _codes(result: SubmissionValidation) -> dict[str, str]:
    return {v.field: v.code for v in result.violations}


class TestRequired:
    @pytest.mark.parametrize("empty", [None, "", "   ", []])
    def test_empty_required_value(self, empty: object) -> None:
        result = validate_submission([BRAND], {"brand": empty})
        assert not result.valid
        assert result.violations == [FieldViolation("brand", REQUIRED, "Brand is required")]

    def test_missing_required_value(self) -> None:
        result = validate_submission([BRAND], {})
        assert _codes(result) == {"brand": REQUIRED}

    def test_optional_may_be_absent(self) -> None:
        result = validate_submission([AMENITIES, SENSORS, EXPIRY], {})
        assert result.valid
        assert result.violations == []

    def test_required_checkbox_must_be_ticked(self) -> None:
        terms = CheckboxField(name="terms", label="Terms", required=True)
        assert _codes(validate_submission([terms], {"terms": False})) == {"terms": REQUIRED}
        assert validate_submission([terms], {"terms": True}).valid

    def test_zero_is_not_empty(self) -> None:
        count = NumberField(name="n", label="N", required=True, min=0)
        assert validate_submission([count], {"n": 0}).valid


class TestNumber:
    def test_within_range(self) -> None:
        assert validate_submission([YEAR], {"year": 2020}).valid

    def test_below_min(self) -> None:
        result = validate_submission([YEAR], {"year": 1970})
        assert result.violations == [FieldViolation("year", RANGE, "Year must be at least 1980")]

    def test_above_max(self) -> None:
        result = validate_submission([YEAR], {"year": 2031})
        assert result.errors == ["Year must not exceed 2030"]

    def test_bounds_inclusive(self) -> None:
        assert validate_submission([YEAR], {"year": 1980}).valid
        assert validate_submission([YEAR], {"year": 2030}).valid

    def test_numeric_string_coerced(self) -> None:
        assert validate_submission([YEAR], {"year": "2015"}).valid
        assert validate_submission([YEAR], {"year": " 2015.5 "}).valid

    def test_numeric_string_rejected_without_coercion(self) -> None:
        result = validate_submission([YEAR], {"year": "2015"}, coerce_numeric_strings=False)
        assert _codes(result) == {"year": TYPE}

    @pytest.mark.parametrize("bad", ["abc", True, float("nan"), float("inf"), [2020]])
    def test_non_numbers(self, bad: object) -> None:
        result = validate_submission([YEAR], {"year": bad})
        assert result.errors == ["Year must be a number"]


class TestChoices:
    def test_valid_select(self) -> None:
        assert validate_submission([CONDITION], {"condition": "Used"}).valid

    def test_invalid_select(self) -> None:
        result = validate_submission([CONDITION], {"condition": "Mint"})
        assert result.violations == [
            FieldViolation("condition", CHOICE, "'Mint' is not a valid option for Condition")
        ]

    def test_select_wants_single_value(self) -> None:
        result = validate_submission([CONDITION], {"condition": ["Used"]})
        assert _codes(result) == {"condition": TYPE}

    def test_valid_multiselect(self) -> None:
        assert validate_submission([AMENITIES], {"amenities": ["Gym", "Lift"]}).valid

    def test_multiselect_invalid_members(self) -> None:
        result = validate_submission([AMENITIES], {"amenities": ["Gym", "Sauna", "Spa"]})
        assert result.errors == ["Amenities has invalid selections: Sauna, Spa"]

    def test_multiselect_duplicates(self) -> None:
        result = validate_submission([AMENITIES], {"amenities": ["Gym", "Gym"]})
        assert result.errors == ["Amenities contains duplicate selections"]

    def test_multiselect_wants_list(self) -> None:
        result = validate_submission([AMENITIES], {"amenities": "Gym"})
        assert _codes(result) == {"amenities": TYPE}


class TestOtherKinds:
    def test_text_must_be_string(self) -> None:
        result = validate_submission([BRAND], {"brand": 42})
        assert result.errors == ["Brand must be text"]

    def test_checkbox_must_be_bool(self) -> None:
        result = validate_submission([SENSORS], {"sensors": "yes"})
        assert _codes(result) == {"sensors": TYPE}

    def test_date_accepts_iso_string_and_date(self) -> None:
        assert validate_submission([EXPIRY], {"expiry": "2026-01-31"}).valid
        assert validate_submission([EXPIRY], {"expiry": date(2026, 1, 31)}).valid

    def test_date_rejects_garbage(self) -> None:
        result = validate_submission([EXPIRY], {"expiry": "31/01/2026"})
        assert result.errors == ["Expiry Date must be a date (YYYY-MM-DD)"]

    @pytest.mark.parametrize(
        "other_iso", ["20260131", "2026-W05-6", "2026-01-31T10:00", "2026-1-31"]
    )
    def test_date_requires_year_month_day_form(self, other_iso: str) -> None:
        result = validate_submission([EXPIRY], {"expiry": other_iso})
        assert _codes(result) == {"expiry": TYPE}

    def test_date_rejects_impossible_day(self) -> None:
        result = validate_submission([EXPIRY], {"expiry": "2026-02-30"})
        assert _codes(result) == {"expiry": TYPE}


class TestCompleteness:
    def test_collects_every_violation(self) -> None:
        result = validate_submission(
            [BRAND, YEAR, CONDITION, AMENITIES],
            {"year": 1900, "condition": "Mint", "amenities": ["Sauna"]},
        )
        assert _codes(result) == {
            "brand": REQUIRED,
            "year": RANGE,
            "condition": CHOICE,
            "amenities": CHOICE,
        }
        # Reported in field order
        assert [v.field for v in result.violations] == ["brand", "year", "condition", "amenities"]

    def test_unknown_fields_ignored_with_warning(self) -> None:
        result = validate_submission([BRAND], {"brand": "Sony", "colour": "red"})
        assert result.valid
        assert result.ignored == ["colour"]
        assert result.warnings == ["Ignored unknown field: colour"]

    def test_violation_to_dict(self) -> None:
        violation = FieldViolation("brand", REQUIRED, "Brand is required")
        assert violation.to_dict() == {
            "field": "brand",
            "code": "required",
            "message": "Brand is required",
        }


class TestAgainstResolvedFields:
    def test_apartment_sale_listing(self) -> None:
        fields = resolve_fields("property", "Apartments for Sale")
        values = {
            "landType": "2BHK",
            "bedrooms": "2",
            "bathrooms": "1",
            "totalArea": "850",
            "areaUnit": "sq ft",
        }
        result = validate_submission(fields, values)
        assert result.valid, result.errors

    def test_apartment_sale_rejects_rent(self) -> None:
        fields = resolve_fields("property", "Apartments for Sale")
        result = validate_submission(fields, {"monthlyRent": 25000})
        assert "monthlyRent" in result.ignored
        assert {v.field for v in result.violations} >= {"bedrooms", "bathrooms", "totalArea"}

    def test_bicycle_listing(self) -> None:
        fields = resolve_fields("vehicles", "Bicycles")
        values = {
            "condition": "Used",
            "brand": "Giant",
            "model": "Talon",
            "year": 2021,
            "bicycleType": "Mountain Bike",
        }
        assert validate_submission(fields, values).valid


class TestParseFormValues:
    FIELDS = [BRAND, YEAR, CONDITION, AMENITIES, SENSORS, EXPIRY]

    def test_text_kinds_keep_raw_text(self) -> None:
        values = parse_form_values(
            self.FIELDS, {"brand": ["13"], "condition": ["true"], "expiry": ["2026-01-31"]}
        )
        assert values == {"brand": "13", "condition": "true", "expiry": "2026-01-31"}

    def test_number_parsed(self) -> None:
        assert parse_form_values(self.FIELDS, {"year": ["2021"]}) == {"year": 2021}
        assert parse_form_values(self.FIELDS, {"year": ['"2021"']}) == {"year": "2021"}
        assert parse_form_values(self.FIELDS, {"year": ["soon"]}) == {"year": "soon"}

    def test_checkbox_parsed(self) -> None:
        assert parse_form_values(self.FIELDS, {"sensors": ["true"]}) == {"sensors": True}
        assert parse_form_values(self.FIELDS, {"sensors": ["yes"]}) == {"sensors": "yes"}

    def test_multiselect_single_value_becomes_list(self) -> None:
        assert parse_form_values(self.FIELDS, {"amenities": ["Gym"]}) == {"amenities": ["Gym"]}

    def test_multiselect_repeated_and_json(self) -> None:
        repeated = parse_form_values(self.FIELDS, {"amenities": ["Gym", "Pool"]})
        assert repeated == {"amenities": ["Gym", "Pool"]}
        literal = parse_form_values(self.FIELDS, {"amenities": ['["Gym", "Lift"]']})
        assert literal == {"amenities": ["Gym", "Lift"]}

    def test_unknown_name_kept_as_text(self) -> None:
        assert parse_form_values(self.FIELDS, {"colour": ["7"]}) == {"colour": "7"}

    def test_repeated_single_value_kind_stays_list(self) -> None:
        values = parse_form_values(self.FIELDS, {"brand": ["Sony", "LG"]})
        result = validate_submission(self.FIELDS, values)
        assert _codes(result)["brand"] == TYPE

    def test_numeric_model_name_validates(self) -> None:
        values = parse_form_values(
            self.FIELDS, {"brand": ["Apple"], "year": ["2020"], "condition": ["Used"]}
        )
        assert validate_submission(self.FIELDS, values).valid

    def test_blank_multiselect_value_is_empty(self) -> None:
        assert parse_form_values(self.FIELDS, {"amenities": [""]}) == {"amenities": []}
