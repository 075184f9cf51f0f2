"""File reading and directory listing for comparisons"""

from pathlib import Path

from ddiff.core.utils.text import split_lines


def read_lines(path: Path) -> list[str]:
    """Read path as UTF-8 (undecodable bytes replaced) and split into lines."""
    return split_lines(path.read_bytes().decode("utf-8", errors="replace"))


def list_files(root: Path, recursive: bool = False) -> list[str]:
    """Return sorted POSIX relative paths of regular files under root.

    Without recursive, only files directly inside root are listed.
    """
    entries = root.rglob("*") if recursive else root.glob("*")
    return sorted(p.relative_to(root).as_posix() for p in entries if p.is_file())
