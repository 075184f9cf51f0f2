"""Line sequence differ: LCS table plus backtracking into equal/delete/insert runs

The table is a flat row-major list of (n+1) * (m+1) ints, so memory and time are
both O(n*m). Inputs are expected to be source-file sized.
"""

from typing import Sequence

from ddiff.core.models import EditOp, OpKind


def _lcs_table(seq1: Sequence[str], seq2: Sequence[str]) -> list[int]:
    """dp[i * (m+1) + j] = LCS length of seq1[:i] and seq2[:j]."""
    n, m = len(seq1), len(seq2)
    width = m + 1
    dp = [0] * ((n + 1) * width)
    for i in range(1, n + 1):
        a = seq1[i - 1]
        row = i * width
        prev = row - width
        for j in range(1, m + 1):
            if a == seq2[j - 1]:
                dp[row + j] = dp[prev + j - 1] + 1
            else:
                up, left = dp[prev + j], dp[row + j - 1]
                dp[row + j] = up if up >= left else left
    return dp


def diff(seq1: Sequence[str], seq2: Sequence[str]) -> list[EditOp]:
    """Return the minimal edit script turning seq1 into seq2, in forward order.

    Consecutive operations of one kind are merged into a single run. When a
    diagonal match is unavailable and both neighbours score the same, the
    backtrack consumes seq1 first (delete wins over insert).
    """
    dp = _lcs_table(seq1, seq2)
    width = len(seq2) + 1

    def match(i: int, j: int) -> bool:
        return i > 0 and j > 0 and seq1[i - 1] == seq2[j - 1]

    def prefer_delete(i: int, j: int) -> bool:
        if j == 0:
            return True
        if i == 0:
            return False
        return dp[(i - 1) * width + j] >= dp[i * width + j - 1]

    ops: list[EditOp] = []
    i, j = len(seq1), len(seq2)
    while i > 0 or j > 0:
        if match(i, j):
            end1, end2 = i, j
            while match(i, j):
                i -= 1
                j -= 1
            ops.append(EditOp(OpKind.equal, i, end1, j, end2))
        elif prefer_delete(i, j):
            end1 = i
            while i > 0 and not match(i, j) and prefer_delete(i, j):
                i -= 1
            ops.append(EditOp(OpKind.delete, i, end1, j, j))
        else:
            end2 = j
            while j > 0 and not match(i, j) and not prefer_delete(i, j):
                j -= 1
            ops.append(EditOp(OpKind.insert, i, i, j, end2))

    ops.reverse()
    return ops
