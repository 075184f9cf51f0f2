"""Shared fixtures for core unit tests"""

import pytest


TWENTY = [f"l{i}" for i in range(20)]


def with_changes(lines: list[str], changes: dict[int, str]) -> list[str]:
    """Copy of lines with the given indices replaced."""
    out = list(lines)
    for i, text in changes.items():
        out[i] = text
    return out


@pytest.fixture(name="twenty_lines")
def twenty_lines_fixture():
    return list(TWENTY)


@pytest.fixture(name="two_change_pair")
def two_change_pair_fixture():
    """Changes at index 2 and 13, separated by 10 unchanged lines."""
    return list(TWENTY), with_changes(TWENTY, {2: "X", 13: "Y"})
