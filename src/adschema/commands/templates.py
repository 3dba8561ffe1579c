"""Command: list the template catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adschema.commands._base import AdCommand

if TYPE_CHECKING:
    from adschema.commands._context import AppContext


@click.command(
    cls=AdCommand,
    examples="""\
  adschema templates
  adschema -v templates
  adschema --json templates""",
)
@click.pass_obj
def templates(app: AppContext) -> None:
    """List templates with their field counts and mapped categories."""
    app.emit(app.service.list_templates())
