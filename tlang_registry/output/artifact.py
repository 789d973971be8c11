"""All-or-nothing writes for generated artifacts."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path


def write_artifact(path: Path | str, text: str) -> Path:
    """Write ``text`` to ``path`` atomically.

    The content goes to a temp file next to the destination which is then
    renamed over it, so readers see either the old file or the complete new
    one. On failure the temp file is removed and the destination is untouched.
    """
    return write_artifacts({Path(path): text})[0]


def write_artifacts(outputs: Mapping[Path, str]) -> list[Path]:
    """Write several artifacts as one unit.

    Every file is fully written to its temp file before any destination is
    replaced, so a failed write leaves all destinations untouched. The
    final renames happen back to back but are not atomic as a group.
    """
    staged: list[tuple[Path, Path]] = []
    try:
        for path, text in outputs.items():
            path = Path(path)
            staged.append((_stage(path, text), path))
        for tmp_path, path in staged:
            os.replace(tmp_path, path)
    except BaseException:
        for tmp_path, _ in staged:
            tmp_path.unlink(missing_ok=True)
        raise
    return [path for _, path in staged]


def _stage(path: Path, text: str) -> Path:
    """Write ``text`` to a temp file beside ``path`` and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_file = tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    )
    tmp_path = Path(tmp_file.name)
    try:
        with tmp_file:
            tmp_file.write(text)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return tmp_path
