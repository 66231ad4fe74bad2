"""Render step results as plain text, prefixed lines or a table."""

from __future__ import annotations

import io
from typing import Sequence

import click
from rich.console import Console as RichConsole
from rich.table import Table

from ..config import OutputOptions
from ..model import StepResult


def _label(result: StepResult) -> str:
    return (result.title or "").strip()


def _text(result: StepResult) -> str:
    return (result.output or "").strip()


def format_plain(results: Sequence[StepResult]) -> str:
    return "\n".join(_text(r) for r in results)


def format_prefixed(results: Sequence[StepResult], colored: bool = False) -> str:
    lines = []
    for r in results:
        label = f"{_label(r)}: "
        if colored:
            label = click.style(label, fg="red")
        lines.append(label + _text(r))
    return "\n".join(lines)


def format_table(results: Sequence[StepResult], title: str = "", colored: bool = False) -> str:
    table = Table(title=title or None)
    table.add_column("Step", style="red" if colored else None)
    table.add_column("Output")
    for r in results:
        table.add_row(_label(r), _text(r))

    buf = io.StringIO()
    console = RichConsole(file=buf, force_terminal=colored, no_color=not colored)
    console.print(table)
    return buf.getvalue().rstrip("\n")


def _header(title: str) -> str:
    return f"{title}\n{'-' * len(title)}"


def format_results(results: Sequence[StepResult], output: OutputOptions) -> str:
    """
    Pick the rendering from the effective output options:

      - table: rich table titled with the pipeline name
      - prefix set: "<title>: <output>" per step, title red when colored
      - otherwise: outputs only, one per line

    `pretty` puts the pipeline name as an underlined header above the
    line-based renderings.
    """
    if output.table:
        return format_table(results, title=output.title, colored=output.colored)

    if output.prefix:
        body = format_prefixed(results, colored=output.colored)
    else:
        body = format_plain(results)

    if output.pretty and output.title:
        return f"{_header(output.title)}\n{body}"
    return body
