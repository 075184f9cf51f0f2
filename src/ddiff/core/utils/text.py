"""Line splitting, binary detection, and whitespace normalization"""

import re


_WS_RUN = re.compile(r"\s+")


def split_lines(text: str) -> list[str]:
    """Split on '\\n', dropping a trailing '\\r' per line and the empty tail after a final newline."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_binary(lines: list[str]) -> bool:
    """True if any line contains a NUL character."""
    return any("\x00" in line for line in lines)


def normalize_whitespace(line: str) -> str:
    """Collapse whitespace runs to one space and drop trailing whitespace."""
    return _WS_RUN.sub(" ", line).rstrip()
