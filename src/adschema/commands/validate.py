"""Command: validate submitted attribute values for a category."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import click

from adschema.commands._base import AdCommand

if TYPE_CHECKING:
    from adschema.commands._context import AppContext


def _load_values(values_file: IO[str] | None) -> dict[str, Any]:
    if values_file is None:
        return {}
    try:
        loaded = json.load(values_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="--values") from exc
    if not isinstance(loaded, dict):
        raise click.BadParameter("must contain a JSON object", param_hint="--values")
    return loaded


def _collect_form(assignments: tuple[str, ...]) -> dict[str, list[str]]:
    form: dict[str, list[str]] = {}
    for assignment in assignments:
        key, sep, raw = assignment.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {assignment!r}", param_hint="--set")
        form.setdefault(key, []).append(raw)
    return form


@click.command(
    cls=AdCommand,
    examples="""\
  adschema validate Vehicles Bicycles -s condition=Used -s bicycleType='Mountain Bike'
  adschema validate Property "Apartments for Sale" --values listing.json
  adschema validate Property "Apartments for Sale" --values listing.json -s bedrooms=3
  adschema validate Services "Tuition" -s subjects=Math -s subjects=Science
  adschema validate Mobiles "Mobile Phones" -s condition=Used -s brand=Apple -s model=13""",
)
@click.argument("category")
@click.argument("leaf")
@click.option(
    "--values",
    "values_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="JSON object of field values ('-' for stdin).",
)
@click.option(
    "-s",
    "--set",
    "assignments",
    multiple=True,
    help="Field value as key=value, typed by the field (repeat a key for several selections).",
)
@click.option(
    "-t",
    "--template",
    default=None,
    help="Validate against this template instead of the category map.",
)
@click.pass_obj
def validate(
    app: AppContext,
    category: str,
    leaf: str,
    values_file: IO[str] | None,
    assignments: tuple[str, ...],
    template: str | None,
) -> None:
    """Validate attribute values for CATEGORY / LEAF."""
    values = _load_values(values_file)
    form = _collect_form(assignments)
    app.emit(app.service.validate(category, leaf, values, template=template, form=form))
