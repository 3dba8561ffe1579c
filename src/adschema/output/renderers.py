"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from adschema.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from adschema.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # Names only, one per line
    items = result.data.get("items") or result.data.get("fields")
    if items and isinstance(items, list):
        return "\n".join(str(item["name"]) for item in items if "name" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="ad.ok")
    op = Text(f"  {result.op}", style="ad.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ad.key")
    if key in ("template", "name"):
        v = Text(str(value), style="ad.name")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _describe_domain(field: dict[str, Any]) -> str:
    """Short value-domain summary for one serialized field."""
    if "options" in field:
        return ", ".join(field["options"])
    low, high = field.get("min"), field.get("max")
    if low is not None and high is not None:
        return f"{low} – {high}"
    if low is not None:
        return f">= {low}"
    if high is not None:
        return f"<= {high}"
    return field.get("placeholder", "")


def _field_table(fields: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for a resolved field list."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="ad.name", no_wrap=True)
    table.add_column("Label", style="ad.label")
    table.add_column("Type")
    table.add_column("Req", justify="center")
    table.add_column("Values")
    if verbose:
        table.add_column("Applies To", style="dim")

    for field in fields:
        kind = str(field.get("type", ""))
        style = style_for_kind(kind)
        row: list[Any] = [
            str(field.get("name", "")),
            str(field.get("label", "")),
            Text(kind, style=style) if style else kind,
            Text("*", style="ad.required") if field.get("required") else "",
            _describe_domain(field),
        ]
        if verbose:
            applies = field.get("applies_to", "all")
            row.append(applies if isinstance(applies, str) else ", ".join(applies))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ad.error")
    op = Text(f"  {result.op}", style="ad.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if not err:
        return
    # Violations are the point of a failed validate, so always list them
    for violation in err.detail.get("violations", []):
        name = Text(f"  {violation.get('field', '?')}", style="ad.name")
        console.print(name, Text(f": {violation.get('message', '')}"))

    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            if k != "violations":
                console.print(f"    {k}: {v}")


# ── Catalog renderers ─────────────────────────────────────────────────


def _render_templates(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the template catalog summary."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Template", style="ad.name", no_wrap=True)
    table.add_column("Label", style="ad.label")
    table.add_column("Fields", justify="right")
    table.add_column("Overrides", justify="right")
    table.add_column("Categories")
    if verbose:
        table.add_column("Icon", style="dim")

    for item in items:
        categories = item.get("categories") or []
        row = [
            str(item.get("name", "")),
            str(item.get("label", "")),
            str(item.get("field_count", 0)),
            str(item.get("override_count", 0)),
            ", ".join(categories) if categories else "(default)",
        ]
        if verbose:
            row.append(str(item.get("icon", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{len(items)} templates")


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a resolved field list as a table."""
    _status_line(console, result)
    for key in ("category", "leaf", "template", "source"):
        if key in result.data:
            _field(console, key, result.data[key])

    fields = result.data.get("fields", [])
    if not fields:
        console.print("\n  No attribute fields for this category.")
        return
    console.print()
    console.print(_field_table(fields, verbose=verbose))
    required = sum(1 for f in fields if f.get("required"))
    console.print(f"\n{len(fields)} fields, {required} required")


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a passing validation."""
    _status_line(console, result)
    for key in ("category", "leaf", "template", "checked"):
        if key in result.data:
            _field(console, key, result.data[key])
    ignored = result.data.get("ignored") or []
    if verbose and ignored:
        _field(console, "ignored", ", ".join(ignored))


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render audit results with issues grouped by category."""
    issues = result.data.get("issues", [])
    count = result.data.get("count", len(issues))

    if count == 0:
        console.print("[ad.ok]OK[/ad.ok]  No issues found.")
        return

    severity_styles = {"error": "ad.error", "warning": "ad.warning"}

    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        cat = str(issue.get("category", "unknown"))
        by_category.setdefault(cat, []).append(issue)

    for cat, cat_issues in by_category.items():
        console.print(f"\n[bold]{cat}[/bold]")
        for issue in cat_issues:
            sev = str(issue.get("severity", "warning"))
            style = severity_styles.get(sev, "")
            prefix = f"[{style}]{sev}[/{style}]" if style else sev
            subject = issue.get("subject")
            line = Text.from_markup(f"  {prefix}")
            if subject:
                line.append(f" [{subject}]")
            line.append(f": {issue.get('message', '')}")
            console.print(line)

    errors = sum(1 for i in issues if i.get("severity") == "error")
    warnings = count - errors
    console.print(f"\n{errors} errors, {warnings} warnings")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_templates": _render_templates,
    "resolve": _render_resolve,
    "validate": _render_validate,
    "check": _render_check,
}
