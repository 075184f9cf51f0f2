"""Comparison steps: file pairs and directory trees"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from ddiff.config import Settings
from ddiff.core.hunks import assemble
from ddiff.core.utils.diff import compute_edits, diff_summary, render_hunks
from ddiff.core.utils.fs import list_files, read_lines
from ddiff.core.utils.text import is_binary


logger = logging.getLogger(__name__)


class Status(str, Enum):
    identical = "identical"
    changed = "changed"
    binary = "binary"
    only_left = "only_left"
    only_right = "only_right"
    error = "error"


@dataclass
class FileResult:
    """Outcome of comparing two files; lines hold the rendered unified diff."""
    path1:  Path
    path2:  Path
    status: Status
    lines:  list[str] = field(default_factory=list)
    stats:  dict[str, int] = field(default_factory=dict)


@dataclass
class EntryResult:
    """One relative path in a directory comparison."""
    rel:    str
    path1:  Path
    path2:  Path
    status: Status
    result: Optional[FileResult] = None
    error:  Optional[str] = None


def _read(path: Path) -> list[str]:
    try:
        return read_lines(path)
    except OSError as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def compare_files(path1: Path, path2: Path, settings: Settings) -> FileResult:
    """Diff two files. Raises RuntimeError if either cannot be read."""
    lines1, lines2 = _read(path1), _read(path2)

    if is_binary(lines1) or is_binary(lines2):
        logger.debug("binary content: %s, %s", path1, path2)
        status = Status.binary if lines1 != lines2 else Status.identical
        return FileResult(path1, path2, status)

    edits = compute_edits(lines1, lines2, settings.ignore_space)
    hunks = assemble(lines1, lines2, edits, settings.context)
    if not hunks:
        return FileResult(path1, path2, Status.identical, stats=diff_summary(edits))
    return FileResult(
        path1, path2, Status.changed,
        lines=render_hunks(str(path1), str(path2), hunks),
        stats=diff_summary(edits),
    )


def compare_dirs(dir1: Path, dir2: Path, settings: Settings) -> list[EntryResult]:
    """Compare every file path present in either tree, in sorted relative-path order.

    Pairs whose size and modification time both match are assumed identical
    without being read. Read failures become error entries; the walk continues.
    """
    left = set(list_files(dir1, settings.recursive))
    right = set(list_files(dir2, settings.recursive))

    results = []
    for rel in sorted(left | right):
        path1, path2 = dir1 / rel, dir2 / rel
        if not path1.exists() and not path2.exists():
            continue
        if not path2.exists():
            results.append(EntryResult(rel, path1, path2, Status.only_left))
            continue
        if not path1.exists():
            results.append(EntryResult(rel, path1, path2, Status.only_right))
            continue
        if path1.is_dir() or path2.is_dir():
            logger.debug("skipping %s: file and directory", rel)
            continue

        st1, st2 = path1.stat(), path2.stat()
        if st1.st_size == st2.st_size and st1.st_mtime_ns == st2.st_mtime_ns:
            logger.debug("skipping %s: size and mtime match", rel)
            results.append(EntryResult(rel, path1, path2, Status.identical))
            continue

        try:
            result = compare_files(path1, path2, settings)
        except RuntimeError as e:
            logger.debug("comparing %s failed: %s", rel, e)
            results.append(EntryResult(rel, path1, path2, Status.error, error=str(e)))
            continue
        results.append(EntryResult(rel, path1, path2, result.status, result=result))
    return results
