"""Edit operations and hunks produced by the line diff engine"""

from dataclasses import dataclass, field
from enum import Enum


class OpKind(str, Enum):
    equal = "equal"
    delete = "delete"
    insert = "insert"


@dataclass(frozen=True)
class EditOp:
    """One run of equal, deleted, or inserted lines as half-open ranges on both sides."""
    kind:   OpKind
    start1: int
    end1:   int
    start2: int
    end2:   int

    @property
    def size(self) -> int:
        """Number of lines covered; inserts count side 2, everything else side 1."""
        if self.kind == OpKind.insert:
            return self.end2 - self.start2
        return self.end1 - self.start1


@dataclass
class Hunk:
    """A change region plus context, addressed by 0-based clipped window starts."""
    start1: int
    len1:   int
    start2: int
    len2:   int
    lines:  list[str] = field(default_factory=list)     # ' ', '-' or '+' prefixed

    @property
    def header(self) -> str:
        # Empty sides keep the 0-based start, as in `@@ -0,0 +1,2 @@`.
        s1 = self.start1 + 1 if self.len1 else self.start1
        s2 = self.start2 + 1 if self.len2 else self.start2
        return f"@@ -{s1},{self.len1} +{s2},{self.len2} @@"

    def render(self) -> list[str]:
        """Header line followed by the prefixed hunk lines."""
        return [self.header, *self.lines]
