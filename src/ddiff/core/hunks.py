"""Hunk assembly: group edit runs into context-bounded unified diff hunks"""

from typing import Iterator, Sequence

from ddiff.core.models import EditOp, Hunk, OpKind


def _group_changes(edits: Sequence[EditOp], context: int) -> Iterator[list[EditOp]]:
    """Yield change groups; an equal run of at least 2*context lines splits groups.

    Each group starts and ends with a non-equal op. Short equal runs between
    changes stay inside the group.
    """
    current: list[EditOp] = []
    for op in edits:
        if op.kind != OpKind.equal:
            current.append(op)
        elif current:
            if op.size >= 2 * context:
                yield current
                current = []
            else:
                current.append(op)
    while current and current[-1].kind == OpKind.equal:
        current.pop()
    if current:
        yield current


def _body(seq1: Sequence[str], seq2: Sequence[str], group: list[EditOp]) -> list[str]:
    """Prefixed lines for a group, deletions ahead of insertions within each change run."""
    lines: list[str] = []
    removed: list[str] = []
    added: list[str] = []
    for op in group:
        if op.kind == OpKind.delete:
            removed.extend("-" + line for line in seq1[op.start1:op.end1])
        elif op.kind == OpKind.insert:
            added.extend("+" + line for line in seq2[op.start2:op.end2])
        else:
            lines += removed + added
            removed, added = [], []
            lines.extend(" " + line for line in seq1[op.start1:op.end1])
    return lines + removed + added


def assemble(
    seq1: Sequence[str],
    seq2: Sequence[str],
    edits: Sequence[EditOp],
    context: int = 3,
    ) -> list[Hunk]:
    """Build unified diff hunks from an edit script. Empty list if there are no changes.

    Negative context is treated as 0. Windows are clipped to each sequence's bounds.
    """
    context = max(context, 0)
    hunks = []
    for group in _group_changes(edits, context):
        first, last = group[0], group[-1]
        start1 = max(first.start1 - context, 0)
        start2 = max(first.start2 - context, 0)
        end1 = min(last.end1 + context, len(seq1))
        end2 = min(last.end2 + context, len(seq2))

        lines = [" " + line for line in seq1[start1:first.start1]]
        lines += _body(seq1, seq2, group)
        lines += [" " + line for line in seq1[last.end1:end1]]
        hunks.append(Hunk(start1, end1 - start1, start2, end2 - start2, lines))
    return hunks
