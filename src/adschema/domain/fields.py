"""Attribute field models.

A field is a tagged union discriminated by ``type``. Each kind carries only
the attributes valid for it, and the models refuse unknown keys, so a
``select`` without options or a ``text`` field with options cannot be
constructed. Overrides go through :func:`merge_field`, which re-validates
the merged mapping against the union.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from adschema.errors import InvalidFieldDefinition

ALL: Literal["all"] = "all"

AppliesTo = Literal["all"] | tuple[str, ...]


class _FieldBase(BaseModel):
    """Attributes shared by every field kind."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = Field(min_length=1)
    label: str = Field(min_length=1)
    required: bool = False
    applies_to: AppliesTo = ALL

    @field_validator("applies_to")
    @classmethod
    def _check_applies_to(cls, value: AppliesTo) -> AppliesTo:
        if value != ALL and len(value) == 0:
            raise ValueError("applies_to must be 'all' or a non-empty list of categories")
        return value

    def applies_to_category(self, category: str) -> bool:
        """True if this field is shown for leaf *category*."""
        return self.applies_to == ALL or category in self.applies_to

    def copy_with(self, **changes: Any) -> AdField:
        """Return a copy with *changes* replacing the named attributes."""
        return merge_field(self, changes)  # type: ignore[arg-type]


class TextField(_FieldBase):
    type: Literal["text"] = "text"
    placeholder: str | None = None


class NumberField(_FieldBase):
    type: Literal["number"] = "number"
    placeholder: str | None = None
    min: int | float | None = None
    max: int | float | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> NumberField:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class _ChoiceField(_FieldBase):
    placeholder: str | None = None
    options: tuple[str, ...] = Field(min_length=1)

    @field_validator("options")
    @classmethod
    def _check_unique(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        dupes = sorted({opt for opt in value if value.count(opt) > 1})
        if dupes:
            raise ValueError(f"duplicate options: {dupes}")
        return value


class SelectField(_ChoiceField):
    type: Literal["select"] = "select"


class MultiselectField(_ChoiceField):
    type: Literal["multiselect"] = "multiselect"


class CheckboxField(_FieldBase):
    type: Literal["checkbox"] = "checkbox"


class DateField(_FieldBase):
    type: Literal["date"] = "date"
    placeholder: str | None = None


AdField = Annotated[
    TextField | NumberField | SelectField | MultiselectField | CheckboxField | DateField,
    Field(discriminator="type"),
]

_FIELD_ADAPTER: TypeAdapter[AdField] = TypeAdapter(AdField)


def _reasons(exc: ValidationError) -> list[str]:
    reasons: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        reasons.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return reasons


def build_field(data: Mapping[str, Any]) -> AdField:
    """Validate a raw mapping into the matching field kind.

    Raises:
        InvalidFieldDefinition: if the mapping breaks the field invariants.
    """
    try:
        return _FIELD_ADAPTER.validate_python(dict(data))
    except ValidationError as exc:
        raise InvalidFieldDefinition(str(data.get("name", "?")), _reasons(exc)) from exc


def merge_field(base: AdField, override: Mapping[str, Any] | None = None) -> AdField:
    """Shallow-merge *override* onto *base*: named keys replace, the rest inherit.

    The base field is never mutated.
    """
    if not override:
        return base
    data = base.model_dump()
    data.update(override)
    return build_field(data)


def field_to_dict(field: AdField) -> dict[str, Any]:
    """JSON-ready dict of a field, omitting unset optional attributes."""
    return field.model_dump(mode="json", exclude_none=True)
