"""Subcommand modules for adschema.

Provides register_commands() which uses deferred imports to keep
``adschema --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from adschema.commands.check import check
    from adschema.commands.resolve import resolve
    from adschema.commands.templates import templates
    from adschema.commands.validate import validate

    cli.add_command(templates)
    cli.add_command(resolve)
    cli.add_command(validate)
    cli.add_command(check)
