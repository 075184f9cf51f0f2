"""Edit script helpers: whitespace-aware diffing, change stats, and unified rendering"""

from typing import Sequence

from ddiff.core.differ import diff
from ddiff.core.hunks import assemble
from ddiff.core.models import EditOp, Hunk, OpKind
from ddiff.core.utils.text import normalize_whitespace


def compute_edits(old: Sequence[str], new: Sequence[str], ignore_space: bool = False) -> list[EditOp]:
    """Diff two line lists, optionally comparing whitespace-normalized copies.

    Normalization is line-for-line, so the returned ranges index the original lists.
    """
    if ignore_space:
        old = [normalize_whitespace(line) for line in old]
        new = [normalize_whitespace(line) for line in new]
    return diff(old, new)


def diff_summary(edits: Sequence[EditOp]) -> dict[str, int]:
    """Return added/deleted/unchanged line counts. Useful for compact change stats."""
    added = deleted = unchanged = 0
    for op in edits:
        if op.kind == OpKind.equal:
            unchanged += op.size
        elif op.kind == OpKind.delete:
            deleted += op.size
        else:
            added += op.size
    return {"added": added, "deleted": deleted, "unchanged": unchanged}


def format_stats(added: int, deleted: int, files: int = None) -> str:
    """One-line change summary, e.g. ' 2 insertions(+), 1 deletion(-)'."""
    def _plural(n: int, word: str) -> str:
        return f"{n} {word}" if n == 1 else f"{n} {word}s"

    parts = [_plural(added, "insertion") + "(+)", _plural(deleted, "deletion") + "(-)"]
    if files is not None:
        parts.insert(0, _plural(files, "file") + " changed")
    return " " + ", ".join(parts)


def render_hunks(from_label: str, to_label: str, hunks: list[Hunk]) -> list[str]:
    """Return '---'/'+++' header lines followed by every hunk. Empty list if no hunks."""
    if not hunks:
        return []
    lines = [f"--- {from_label}", f"+++ {to_label}"]
    for hunk in hunks:
        lines.extend(hunk.render())
    return lines


def unified_diff(
    old: Sequence[str],
    new: Sequence[str],
    from_label: str = "a",
    to_label: str = "b",
    context: int = 3,
    ignore_space: bool = False,
    ) -> list[str]:
    """Return unified diff lines comparing old to new (no trailing newlines). Empty list if identical.

    Join with '\\n' for display. Hunk lines always show the original text, even
    when ignore_space decided which lines count as equal.
    """
    edits = compute_edits(old, new, ignore_space)
    return render_hunks(from_label, to_label, assemble(old, new, edits, context))
