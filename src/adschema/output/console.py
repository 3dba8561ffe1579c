"""Rich Console factory and theme for adschema output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

AD_THEME = Theme(
    {
        "ad.ok": "bold green",
        "ad.error": "bold red",
        "ad.warning": "bold yellow",
        "ad.op": "bold cyan",
        "ad.key": "dim",
        "ad.name": "bold blue",
        "ad.label": "bold",
        "ad.required": "bold magenta",
        "ad.kind.text": "green",
        "ad.kind.number": "cyan",
        "ad.kind.choice": "yellow",
        "ad.kind.checkbox": "blue",
        "ad.kind.date": "magenta",
    }
)

_KIND_STYLES: dict[str, str] = {
    "text": "ad.kind.text",
    "number": "ad.kind.number",
    "select": "ad.kind.choice",
    "multiselect": "ad.kind.choice",
    "checkbox": "ad.kind.checkbox",
    "date": "ad.kind.date",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (``[output] width`` from config).
    """
    return Console(
        file=StringIO(),
        theme=AD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a field kind."""
    return _KIND_STYLES.get(kind, "")
