"""Command: audit the static field catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adschema.commands._base import AdCommand

if TYPE_CHECKING:
    from adschema.commands._context import AppContext


@click.command(
    cls=AdCommand,
    examples="""\
  adschema check
  adschema check --errors-only
  adschema check --min-severity error
  adschema --json check""",
)
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(app: AppContext, min_severity: str, errors_only: bool) -> None:
    """Check templates and overrides for configuration problems."""
    threshold = "error" if errors_only else min_severity
    app.emit(app.service.check(min_severity=threshold))
