"""Click base classes that carry per-command usage examples.

``--help`` stays short; sample invocations (real category and leaf names)
are printed on demand with ``--examples``.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    text = textwrap.dedent(examples).strip("\n")

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(text, "  "))
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show sample invocations and exit.",
    )


class _ExamplesMixin:
    """Accept an ``examples=`` keyword and expose it as ``--examples``."""

    examples: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))  # type: ignore[attr-defined]


class AdCommand(_ExamplesMixin, click.Command):
    """Leaf command (``resolve``, ``validate``...) with ``--examples``."""


class AdGroup(_ExamplesMixin, click.Group):
    """Root group; subcommands default to :class:`AdCommand`."""

    command_class = AdCommand
