# Program: License Updater CLI
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from .api import LicenseUpdater
from .config import AppConfig, ConfigurationError, load_config
from .events import FileReport
from .files import FileIOError
from .log import configure

app = typer.Typer(
    add_completion=False,
    help="Updates copyright headers and license footers in source code files.",
)
console = Console(highlight=False, soft_wrap=True)


def print_report(report: FileReport) -> None:
    style = {"skip": "yellow", "error": "red"}.get(report.action)
    if report.action == "write" and report.changed:
        style = "green"
    for line in report.lines():
        console.print(line, style=style, markup=False)
    if report.diff:
        console.print(Syntax(report.diff, "diff", theme="ansi_dark", background_color="default"))


@app.command()
def update(
    path: Path = typer.Argument(..., help="File or directory to process"),
    author: Optional[str] = typer.Option(None, "--author", "-a", metavar="NAME", help="Sets the copyright author name"),
    license_file: Optional[Path] = typer.Option(
        None,
        "--license",
        "-l",
        metavar="FILE",
        help="Path to license file (default: searches for LICENSE in project root)",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be done without making changes"),
    diff: bool = typer.Option(False, "--diff", help="Print a unified diff of each change (only with --dry-run)"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    year: Optional[int] = typer.Option(None, "--year", help="Year to stamp (default: current UTC year)"),
    keep_going: bool = typer.Option(False, "--keep-going", help="Continue past files that cannot be read or written"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Update copyright headers and license footers under PATH."""
    configure("DEBUG" if verbose else None)
    try:
        cfg = load_config(config_file) if config_file else AppConfig()
        cfg = replace(
            cfg,
            author=author or cfg.author,
            license_path=license_file or cfg.license_path,
            year=year if year is not None else cfg.year,
            fail_fast=cfg.fail_fast and not keep_going,
        )
        if diff and not dry_run:
            raise ConfigurationError("--diff is only valid with --dry-run")
        if not cfg.author:
            raise ConfigurationError("Missing --author (or 'author' in the config file)")
        if not path.exists():
            raise ConfigurationError(f"Path does not exist or is not accessible: {path}")
        updater = LicenseUpdater.for_path(cfg, path, on_report=print_report, with_diff=diff)
        summary = updater.run(path, dry_run=dry_run)
    except ConfigurationError as exc:
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1)
    except FileIOError as exc:
        console.print(f"Failed: {exc}", style="red", markup=False)
        raise typer.Exit(code=1)

    console.print(summary.describe(), style="bold", markup=False)
    if not summary.ok:
        raise typer.Exit(code=1)


def main() -> int:
    app()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


# Created by Dr. Z. Bakhtiyorov
