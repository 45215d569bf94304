#!/usr/bin/env python3
"""
magicsniff CLI Display Module

Rich and JSON rendering of detection results.
"""

import json
import sys
from typing import IO, Any, cast

from rich.console import Console
from rich.table import Table

from ..core.patterns import Rule
from ..domain.file_types import FileType
from ..domain.results import DetectionResult


class _StdoutProxy:
    def write(self, data: str) -> int:
        return sys.stdout.write(data)

    def flush(self) -> None:
        sys.stdout.flush()

    def isatty(self) -> bool:
        return sys.stdout.isatty()

    @property
    def encoding(self) -> str:
        return getattr(sys.stdout, "encoding", "utf-8")

    @property
    def errors(self) -> str:
        return getattr(sys.stdout, "errors", "strict")


console = Console(file=cast(IO[str], _StdoutProxy()))
# Diagnostics stay off stdout so JSON output remains parseable
error_console = Console(stderr=True)

UNKNOWN_TYPE = "[yellow]unknown[/yellow]"


def format_size(size: int) -> str:
    """Human readable byte count"""
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"  # pragma: no cover


def display_results(results: list[DetectionResult], show_libmagic: bool = False) -> None:
    """Print detection results as a table"""
    table = Table(title="File Type Detection", show_header=True, expand=True)
    table.add_column("Path", style="cyan", overflow="fold")
    table.add_column("Type", style="green", no_wrap=True)
    table.add_column("Ext", no_wrap=True)
    table.add_column("Size", justify="right", no_wrap=True)
    if show_libmagic:
        table.add_column("libmagic", style="dim", overflow="fold")

    for result in results:
        if result.error:
            row = [result.path, f"[red]error: {result.error}[/red]", "", ""]
        else:
            row = [
                result.path,
                result.description if result.file_type else UNKNOWN_TYPE,
                result.extension or "",
                format_size(result.size),
            ]
        if show_libmagic:
            row.append(result.libmagic or "N/A")
        table.add_row(*row)

    console.print(table)


def display_json(results: list[DetectionResult], indent: int = 2) -> None:
    payload: Any = [result.to_dict() for result in results]
    console.print(json.dumps(payload, indent=indent), soft_wrap=True, markup=False, highlight=False)


def display_file_types(rules: tuple[Rule, ...]) -> None:
    """Print every known file type with the patterns that identify it"""
    table = Table(title="Supported File Types", show_header=True, expand=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Ext", no_wrap=True)
    table.add_column("Category")
    table.add_column("Start pattern", style="green", overflow="fold")
    table.add_column("End pattern", style="green", overflow="fold")

    for file_type in FileType:
        for rule in (rule for rule in rules if rule.file_type is file_type):
            table.add_row(
                file_type.name,
                file_type.extension(),
                file_type.category(),
                rule.start.describe(),
                rule.end.describe(),
            )

    console.print(table)


def display_error(message: str) -> None:
    error_console.print(f"[red]Error: {message}[/red]")
