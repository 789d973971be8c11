"""Shared fixtures for registry generator tests."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

FIXTURE_SRC = Path(__file__).parent / "fixtures" / "tlang" / "src"

FIXED_INSTANT = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixture_src() -> Path:
    return FIXTURE_SRC


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_INSTANT


@pytest.fixture
def write_tree(tmp_path):
    """Write a {relative path: text} mapping under tmp_path/src."""

    def _write(files: dict[str, str]) -> Path:
        src = tmp_path / "src"
        for rel, text in files.items():
            path = src / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text)
        return src

    return _write
