"""Submission validator for resolved field lists.

Violations are collected across every field in one pass so the caller can
show all errors at once. Values for names outside the field list are
ignored (and reported as warnings), never rejected.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from adschema.domain.fields import (
    AdField,
    CheckboxField,
    DateField,
    MultiselectField,
    NumberField,
    SelectField,
    TextField,
)

REQUIRED = "required"
TYPE = "type"
RANGE = "range"
CHOICE = "choice"

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint on one submitted field."""

    field: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "code": self.code, "message": self.message}


@dataclass(frozen=True)
class SubmissionValidation:
    """Result of validating a submitted value map."""

    valid: bool
    violations: list[FieldViolation]
    warnings: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        return [v.message for v in self.violations]


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def _parse_number(value: Any, *, coerce_strings: bool) -> int | float | None:
    """Numeric value of *value*, or None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number: int | float = value
    elif coerce_strings and isinstance(value, str):
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None
    else:
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


def _check_number(f: NumberField, value: Any, coerce_strings: bool) -> list[FieldViolation]:
    number = _parse_number(value, coerce_strings=coerce_strings)
    if number is None:
        return [FieldViolation(f.name, TYPE, f"{f.label} must be a number")]
    if f.min is not None and number < f.min:
        return [FieldViolation(f.name, RANGE, f"{f.label} must be at least {f.min}")]
    if f.max is not None and number > f.max:
        return [FieldViolation(f.name, RANGE, f"{f.label} must not exceed {f.max}")]
    return []


def _check_multiselect(f: MultiselectField, value: Any) -> list[FieldViolation]:
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        return [FieldViolation(f.name, TYPE, f"{f.label} must be a list of options")]
    invalid = [v for v in value if v not in f.options]
    if invalid:
        return [
            FieldViolation(
                f.name,
                CHOICE,
                f"{f.label} has invalid selections: {', '.join(invalid)}",
            )
        ]
    if len(set(value)) != len(value):
        return [FieldViolation(f.name, CHOICE, f"{f.label} contains duplicate selections")]
    return []


def _check_date(f: DateField, value: Any) -> list[FieldViolation]:
    if isinstance(value, date):
        return []
    if isinstance(value, str) and _ISO_DATE.fullmatch(value.strip()):
        try:
            date.fromisoformat(value.strip())
            return []
        except ValueError:
            pass
    return [FieldViolation(f.name, TYPE, f"{f.label} must be a date (YYYY-MM-DD)")]


def _check_value(f: AdField, value: Any, coerce_strings: bool) -> list[FieldViolation]:
    """Type and domain checks for a non-empty *value*."""
    if isinstance(f, TextField):
        if not isinstance(value, str):
            return [FieldViolation(f.name, TYPE, f"{f.label} must be text")]
        return []
    if isinstance(f, NumberField):
        return _check_number(f, value, coerce_strings)
    if isinstance(f, SelectField):
        if not isinstance(value, str):
            return [FieldViolation(f.name, TYPE, f"{f.label} must be a single option")]
        if value not in f.options:
            message = f"'{value}' is not a valid option for {f.label}"
            return [FieldViolation(f.name, CHOICE, message)]
        return []
    if isinstance(f, MultiselectField):
        return _check_multiselect(f, value)
    if isinstance(f, CheckboxField):
        if not isinstance(value, bool):
            return [FieldViolation(f.name, TYPE, f"{f.label} must be true or false")]
        return []
    return _check_date(f, value)


def validate_submission(
    fields: Iterable[AdField],
    values: Mapping[str, Any],
    *,
    coerce_numeric_strings: bool = True,
) -> SubmissionValidation:
    """Validate *values* against *fields*, collecting every violation.

    Args:
        fields: Resolved field list (see :mod:`adschema.domain.resolution`).
        values: Submitted ``field name -> value`` map.
        coerce_numeric_strings: Accept numeric strings for number fields,
            as submitted by HTML forms.
    """
    fields = list(fields)
    violations: list[FieldViolation] = []

    for f in fields:
        value = values.get(f.name)
        unchecked = isinstance(f, CheckboxField) and value is False
        if _is_empty(value) or unchecked:
            if f.required:
                violations.append(FieldViolation(f.name, REQUIRED, f"{f.label} is required"))
            continue
        violations.extend(_check_value(f, value, coerce_numeric_strings))

    known = {f.name for f in fields}
    ignored = [name for name in values if name not in known]
    warnings = [f"Ignored unknown field: {name}" for name in ignored]

    return SubmissionValidation(
        valid=len(violations) == 0,
        violations=violations,
        warnings=warnings,
        ignored=ignored,
    )


def _json_literal(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _form_value(f: AdField | None, raws: Sequence[str]) -> Any:
    if isinstance(f, MultiselectField):
        if len(raws) == 1:
            if not raws[0].strip():
                return []
            literal = _json_literal(raws[0])
            return literal if isinstance(literal, list) else [raws[0]]
        return list(raws)
    if len(raws) != 1:
        return list(raws)

    raw = raws[0]
    if isinstance(f, NumberField):
        literal = _json_literal(raw)
        if isinstance(literal, (int, float, str)) and not isinstance(literal, bool):
            return literal
        return raw
    if isinstance(f, CheckboxField):
        literal = _json_literal(raw)
        return literal if isinstance(literal, bool) else raw
    return raw


def parse_form_values(
    fields: Iterable[AdField], form: Mapping[str, Sequence[str]]
) -> dict[str, Any]:
    """Turn ``name -> [text, ...]`` form input into typed submission values.

    Interpretation follows the target field's kind:

    * number: a JSON number (or quoted string) when it parses, else the text;
    * checkbox: ``true``/``false``, else the text;
    * multiselect: a JSON list, or the text values as a list (one value
      gives a one-item list);
    * text, select, date and unknown names: the text as given, so
      ``model=13`` stays ``"13"``.

    Several values for a non-multiselect name are kept as a list, which the
    validator then reports as the wrong type.
    """
    by_name = {f.name: f for f in fields}
    return {name: _form_value(by_name.get(name), raws) for name, raws in form.items() if raws}
