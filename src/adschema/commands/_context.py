"""AppContext: the object every subcommand receives via ``@click.pass_obj``.

Holds the merged settings, owns the :class:`SchemaService`, and turns a
ServiceResult into terminal output plus an exit status.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import TYPE_CHECKING

import click

from adschema.config.logging import configure_logging
from adschema.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from adschema.config.settings import SchemaSettings
    from adschema.services.result import ServiceResult
    from adschema.services.schema import SchemaService

logger = logging.getLogger(__name__)


class AppContext:
    """Per-invocation state built by the root group.

    Logging is configured here, before any command runs. The service (and
    with it the catalog modules) is only imported when a command asks for
    it, so ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: SchemaSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            width=settings.output.width,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.config_path is not None:
            logger.debug("Loaded config from %s", settings.config_path)

    @cached_property
    def service(self) -> SchemaService:
        from adschema.services.schema import SchemaService

        return SchemaService(self.settings.validation)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful output goes to stdout; failures go to stderr. Warnings
        are printed to stderr as ``WARNING:`` lines except in ``--json``
        mode, where they are already part of the payload.
        """
        text = format_result(result, settings=self.output)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

        if result.ok:
            click.echo(text)
            return

        code = result.error.code if result.error else "UNKNOWN"
        logger.debug("%s failed with %s", result.op, code)
        click.echo(text, err=True)
        raise SystemExit(1)
