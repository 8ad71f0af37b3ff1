# topmark:header:start
#
#   project      : SetterScan
#   file         : emitters.py
#   file_relpath : src/setterscan/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render discovery reports for the CLI.

Payload builders and renderers here are Click-free and return strings; the
``emit_*`` helpers write them through a console.

Formats:
    - ``default``: aligned table (``NAME  VALUE  TYPE  COUNT``), warnings on stderr.
    - ``json``: one document with ``meta``, ``results`` and ``warnings``.
    - ``ndjson``: one object per line, tagged with ``kind``.
    - ``markdown``: heading, results table and a warnings list.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypedDict

from setterscan.cli.options import OutputFormat
from setterscan.constants import SETTERSCAN_VERSION

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from setterscan.cli.console import ConsoleLike
    from setterscan.diagnostic.model import FrozenDiagnosticLog
    from setterscan.setters.discovery import DiscoveryReport
    from setterscan.setters.registry import SetterResult

RESULT_HEADERS: tuple[str, ...] = ("NAME", "VALUE", "TYPE", "COUNT")


class MetaPayload(TypedDict):
    """Metadata describing the SetterScan runtime for machine output."""

    tool: str
    version: str


def build_meta_payload() -> MetaPayload:
    """Return the tool name and installed version."""
    return {"tool": "setterscan", "version": SETTERSCAN_VERSION}


def build_report_payload(report: DiscoveryReport) -> dict[str, Any]:
    """Return a JSON-friendly mapping of ``report``."""
    return {
        "meta": build_meta_payload(),
        "results": [result.to_dict() for result in report.results],
        "warnings": report.warnings.messages(),
    }


def _result_row(result: SetterResult) -> tuple[str, str, str, str]:
    return (result.name, result.value, result.type, str(result.count))


def render_text_table(results: Sequence[SetterResult]) -> str:
    """Render results as a left-aligned plain-text table (header row included)."""
    rows: list[tuple[str, ...]] = [RESULT_HEADERS, *(_result_row(r) for r in results)]
    widths: list[int] = [max(len(row[i]) for row in rows) for i in range(len(RESULT_HEADERS))]
    lines: list[str] = [
        "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip() for row in rows
    ]
    return "\n".join(lines)


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: Rows, each the same length as ``headers``.
        align: Optional mapping of column index to ``"left"`` (default),
            ``"right"`` or ``"center"``.

    Returns:
        The Markdown table, ending with a newline.

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(str(h))) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = widths[i]
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    separator: str = "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"
    lines: list[str] = [_line(headers), separator]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"


def render_markdown_report(report: DiscoveryReport) -> str:
    """Render ``report`` as a Markdown document."""
    parts: list[str] = ["# Setters", ""]
    if report.results:
        parts.append(
            render_markdown_table(
                ("Name", "Value", "Type", "Count"),
                [_result_row(r) for r in report.results],
                align={3: "right"},
            ).rstrip("\n")
        )
    else:
        parts.append("_No setters found._")
    if report.warnings:
        parts.extend(["", "## Warnings", ""])
        parts.extend(f"- {message}" for message in report.warnings.messages())
    return "\n".join(parts) + "\n"


def render_ndjson_report(report: DiscoveryReport) -> list[str]:
    """Render ``report`` as NDJSON lines: setters first, then warnings."""
    lines: list[str] = [
        json.dumps({"kind": "setter", **result.to_dict()}) for result in report.results
    ]
    lines.extend(
        json.dumps({"kind": "warning", "message": message})
        for message in report.warnings.messages()
    )
    return lines


def emit_diagnostics(console: ConsoleLike, diagnostics: FrozenDiagnosticLog) -> None:
    """Write diagnostics to stderr, one per line, prefixed with their level."""
    for diagnostic in diagnostics:
        label: str = diagnostic.level.value
        console.warn(f"[{label}] {diagnostic.message}")


def emit_report(
    console: ConsoleLike,
    report: DiscoveryReport,
    fmt: OutputFormat,
    *,
    verbosity: int = 0,
) -> None:
    """Write ``report`` to the console in the requested format.

    In the ``default`` format warnings go to stderr (unless ``verbosity < 0``);
    the other formats embed them in their stdout payload.
    """
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(build_report_payload(report), indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for line in render_ndjson_report(report):
            console.print(line)
        return
    if fmt == OutputFormat.MARKDOWN:
        console.print(render_markdown_report(report), nl=False)
        return

    if verbosity >= 0:
        emit_diagnostics(console, report.warnings)
    if verbosity > 0:
        console.print(console.styled("Setters:", bold=True, underline=True))
    if report.results:
        table: list[str] = render_text_table(report.results).splitlines()
        console.print(console.styled(table[0], bold=True))
        for line in table[1:]:
            console.print(line)
    elif verbosity > 0:
        console.print("(none)")
    if verbosity > 0:
        console.print()
        console.print(f"{len(report.results)} setter(s), {len(report.warnings)} warning(s)")
