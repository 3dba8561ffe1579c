"""Command: show the attribute fields for a category."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adschema.commands._base import AdCommand

if TYPE_CHECKING:
    from adschema.commands._context import AppContext


@click.command(
    cls=AdCommand,
    examples="""\
  adschema resolve Property "Apartments for Sale"
  adschema resolve Vehicles Bicycles
  adschema resolve Anything "Body Massage" --template services
  adschema --json resolve Mobiles "Mobile Phones" """,
)
@click.argument("category")
@click.argument("leaf")
@click.option(
    "-t",
    "--template",
    default=None,
    help="Resolve against this template instead of the category map.",
)
@click.pass_obj
def resolve(app: AppContext, category: str, leaf: str, template: str | None) -> None:
    """Resolve the fields shown for CATEGORY / LEAF."""
    app.emit(app.service.resolve(category, leaf, template=template))
