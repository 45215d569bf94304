#!/usr/bin/env python3
"""
magicsniff CLI - Command Line Interface

This module provides the Click-based CLI entry point for magicsniff.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any

import click

from .__version__ import __author__, __license__, __version__
from .application.detection_service import DetectionService
from .cli.display import (
    console,
    display_error,
    display_file_types,
    display_json,
    display_results,
)
from .config import Config
from .core.rule_table import RULE_TABLE
from .utils.logger import setup_logger


@dataclass
class CLIArgs:
    paths: tuple[str, ...]
    output_json: bool
    recursive: bool
    libmagic: bool
    list_types: bool
    config: str | None
    verbose: bool
    quiet: bool
    version: bool


def configure_logging_levels(verbose: bool, quiet: bool) -> None:
    """Configure logging levels based on verbosity settings."""
    level = logging.INFO if verbose and not quiet else logging.WARNING

    logger = setup_logger(level=level, log_to_file=False)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def main(**kwargs: Any):
    """
    magicsniff - identify files by their magic numbers.
    """
    args = CLIArgs(**kwargs)
    try:
        sys.exit(run_cli(args))
    except KeyboardInterrupt:
        console.print("\n[yellow]Detection interrupted by user[/yellow]")
        sys.exit(1)


@click.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("-j", "--json", "output_json", is_flag=True, help="Output results in JSON format")
@click.option("-r", "--recursive", is_flag=True, help="Descend into sub-directories")
@click.option("--libmagic", is_flag=True, help="Cross-check results with libmagic")
@click.option("--list-types", is_flag=True, help="List supported file types and exit")
@click.option("--config", type=click.Path(dir_okay=False), help="Custom config file path")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Only report warnings and errors")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Click-based CLI entry point."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> int:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        console.print(
            f"[bold cyan]magicsniff[/bold cyan] version [bold green]{__version__}[/bold green]"
        )
        console.print(f"Author: {__author__}")
        console.print(f"License: {__license__}")
        return 0

    if args.list_types:
        display_file_types(RULE_TABLE)
        return 0

    if not args.paths:
        display_error("no input files given (see --help)")
        return 1

    configure_logging_levels(args.verbose, args.quiet)

    config = Config(args.config)
    if args.libmagic:
        config.set("libmagic", "enabled", True)

    service = DetectionService(config)
    if args.libmagic and service.magic_adapter is not None and not service.magic_adapter.available:
        display_error("libmagic is not available, install python-magic and libmagic")

    results = service.detect_paths(args.paths, recursive=args.recursive or None)

    if args.output_json:
        display_json(results, indent=config.get_json_indent())
    else:
        display_results(results, show_libmagic=config.is_libmagic_enabled())

    return 0 if all(result.ok for result in results) else 1
