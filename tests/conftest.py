from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

import pytest


def build_zip(entries: Iterable[tuple[str, bytes | str]]) -> bytes:
    """Build an in-memory zip archive from (name, payload) pairs."""
    buffer = io.BytesIO()
    with ZipFile(buffer, mode="w", compression=ZIP_DEFLATED) as archive:
        for name, data in entries:
            archive.writestr(name, data)
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def workspace_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Create workspaces under a per-test directory so leftovers are visible."""
    root = tmp_path / "workspaces"
    root.mkdir()
    monkeypatch.setenv("LOC_COUNTER_TEMP_DIR", root.as_posix())
    return root


@pytest.fixture
def make_zip() -> Callable[[Iterable[tuple[str, bytes | str]]], bytes]:
    """Return the in-memory zip builder."""
    return build_zip
