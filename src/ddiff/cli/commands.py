"""CLI command implementations"""

import stat
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from ddiff.config import Settings, load_config
from ddiff.core.compare import EntryResult, FileResult, Status, compare_dirs, compare_files
from ddiff.core.utils.diff import format_stats
from ddiff.core.utils.style import colorize
from ddiff.log import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail(str(e))


def _echo_lines(lines: list[str], color: bool) -> None:
    for line in lines:
        typer.echo(colorize(line) if color else line)


def _echo_file(result: FileResult, settings: Settings) -> bool:
    """Print one file comparison. Returns True if anything differed."""
    if result.status == Status.binary:
        if settings.binary:
            typer.echo(f"Binary files {result.path1} and {result.path2} differ")
        return True
    if result.status != Status.changed:
        return False
    _echo_lines(result.lines, settings.color)
    if settings.stats:
        typer.echo(format_stats(result.stats["added"], result.stats["deleted"]))
    return True


def _echo_entries(entries: list[EntryResult], settings: Settings) -> None:
    """Print per-entry output for a directory comparison and an optional summary."""
    changed = added = deleted = 0
    for entry in entries:
        if entry.status == Status.only_left:
            _echo_lines([f"--- {entry.path1}"], settings.color)
        elif entry.status == Status.only_right:
            _echo_lines([f"+++ {entry.path2}"], settings.color)
        elif entry.status == Status.error:
            typer.echo(f"Error comparing {entry.rel}: {entry.error}", err=True)
        elif entry.result is not None and _echo_file(entry.result, settings):
            changed += 1
            added += entry.result.stats.get("added", 0)
            deleted += entry.result.stats.get("deleted", 0)
    if settings.stats:
        typer.echo(format_stats(added, deleted, files=changed))


def _stat(path: Path):
    try:
        return path.stat()
    except OSError as e:
        typer.echo(f"Error accessing {path}: {e}", err=True)
        raise typer.Exit(1)


def compare_cmd(
    path1: Annotated[Path, typer.Argument(help="First file or directory")],
    path2: Annotated[Path, typer.Argument(help="Second file or directory")],
    context: Annotated[Optional[int], typer.Option("--context", "-U", help="Number of context lines")] = None,
    color: Annotated[Optional[bool], typer.Option("--color/--no-color", help="Show colored output")] = None,
    recursive: Annotated[Optional[bool], typer.Option("--recursive", "-r", help="Compare directories recursively")] = None,
    binary: Annotated[Optional[bool], typer.Option("--binary", help="Show binary file differences")] = None,
    ignore_space: Annotated[Optional[bool], typer.Option("--ignore-space", "-b", help="Ignore whitespace changes")] = None,
    stats: Annotated[Optional[bool], typer.Option("--stats", help="Show diff statistics")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Compare two files or two directories and print unified diffs."""
    settings = _settings(overrides={
        "context": context, "color": color, "recursive": recursive, "binary": binary,
        "ignore_space": ignore_space, "stats": stats,
        "log_level": log_level.upper() if log_level else None,
    })
    setup_logging(settings.log_level)

    is_dir1 = stat.S_ISDIR(_stat(path1).st_mode)
    is_dir2 = stat.S_ISDIR(_stat(path2).st_mode)

    if is_dir1 and is_dir2:
        try:
            entries = compare_dirs(path1, path2, settings)
        except OSError as e:
            _fail("comparing directories failed", e)
        _echo_entries(entries, settings)
    elif not is_dir1 and not is_dir2:
        try:
            result = compare_files(path1, path2, settings)
        except RuntimeError as e:
            _fail("comparing files failed", e)
        _echo_file(result, settings)
    else:
        _fail("Cannot compare file with directory")
