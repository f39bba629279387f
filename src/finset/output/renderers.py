"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; set operations
share the domain renderer and unknown ops fall through to a generic
key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from finset.output.console import create_console, get_output, style_for_bool, style_for_mode

if TYPE_CHECKING:
    from rich.console import Console

    from finset.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the result value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "result" in result.data:
        return _compact(result.data["result"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _compact(value: Any) -> str:
    """Booleans as true/false, everything else as compact JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(
        Text("OK", style="finset.ok"),
        Text(f"  {result.op}", style="finset.op"),
        sep="",
    )


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    shown = value if isinstance(value, str) else _compact(value)
    console.print(Text(f"  {key}: ", style="finset.key"), Text(shown, style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    telemetry = result.meta.get("telemetry")
    if telemetry:
        console.print(Text("  telemetry:", style="dim"))
        _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    line = f"{prefix}{span.get('name', '?')} {span.get('duration_ms', 0.0):.3f}ms"
    annotations = span.get("annotations")
    if annotations:
        line += " " + " ".join(f"{k}={v}" for k, v in annotations.items())
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_domain(result: ServiceResult, console: Console) -> None:
    """Set operations, product and power set."""
    _status_line(console, result)
    mode = result.data.get("mode", "")
    _field(console, "mode", mode, style_for_mode(mode))
    _field(console, "count", result.data.get("count"))
    _field(console, "result", result.data.get("result"))


def _render_boolean(result: ServiceResult, console: Console) -> None:
    """Predicates, disjointness and logic."""
    _status_line(console, result)
    for key, value in result.data.items():
        if key == "result":
            continue
        _field(console, key, value)
    value = result.data.get("result")
    _field(console, "result", value, style_for_bool(value))


def _render_sumtype(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    if data.get("name"):
        _field(console, "name", data["name"])
    disjoint = data.get("pairwise_disjoint")
    _field(console, "pairwise_disjoint", disjoint, style_for_bool(disjoint))
    if "exhaustive" in data:
        _field(console, "exhaustive", data["exhaustive"], style_for_bool(data["exhaustive"]))

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("tag", style="finset.tag")
    table.add_column("values")
    by_tag: dict[str, list[Any]] = {tag: [] for tag in data.get("tags", [])}
    for variant in data.get("variants", []):
        by_tag.setdefault(variant["tag"], []).append(variant["value"])
    uninhabited = set(data.get("uninhabited", []))
    for tag, values in by_tag.items():
        shown = "(uninhabited)" if tag in uninhabited else _compact(values)
        table.add_row(Text(tag), Text(shown))
    console.print(table)
    _field(console, "variant_count", data.get("variant_count"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="finset.error"),
        Text(f"  {result.op}", style="finset.op"),
        Text(f" — {message}"),
        sep="",
    )
    if verbose and error and error.detail:
        for key, value in error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "union": _render_domain,
    "intersection": _render_domain,
    "difference": _render_domain,
    "symmetric-difference": _render_domain,
    "complement": _render_domain,
    "product": _render_domain,
    "powerset": _render_domain,
    "check": _render_boolean,
    "disjoint": _render_boolean,
    "logic": _render_boolean,
    "sumtype": _render_sumtype,
}
