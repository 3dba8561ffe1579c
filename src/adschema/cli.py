"""Root CLI group for adschema with global flags and command registration."""

from __future__ import annotations

import click

from adschema import __version__
from adschema.commands import register_commands
from adschema.commands._base import AdGroup
from adschema.commands._context import AppContext
from adschema.config.settings import SchemaSettings


@click.group(
    cls=AdGroup,
    invoke_without_command=True,
    examples="""\
  adschema templates
  adschema resolve Property "Apartments for Sale"
  adschema validate Vehicles Bicycles -s condition=Used
  adschema check""",
)
@click.version_option(version=__version__, prog_name="adschema")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """adschema — category-driven ad attribute schema tool."""
    ctx.ensure_object(dict)
    # Unset flags fall through to ADSCHEMA_* env vars and the TOML file
    flags = {
        name: True
        for name, value in (
            ("json_output", json_output),
            ("quiet", quiet),
            ("verbose", verbose),
            ("log_json", log_json),
        )
        if value
    }
    settings = SchemaSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
