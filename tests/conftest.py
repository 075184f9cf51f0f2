"""Root test configuration: isolate config sources and build sample trees"""

import logging
from pathlib import Path

import pytest

from ddiff.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no DDIFF_* env vars set."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DDIFF_{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(name="make_tree")
def make_tree_fixture(tmp_path):
    """Write {relative_path: text-or-bytes} under tmp_path/<name> and return the root."""
    def _make(name: str, files: dict) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            p = root / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                p.write_bytes(content)
            else:
                p.write_text(content)
        return root
    return _make
