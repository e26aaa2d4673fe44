from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from mdgen.documents import ProjectFileReader
from tests.reader_helpers import StaticReader


@pytest.fixture
def static_reader():
    def _make(files: dict[str, str] | None = None) -> StaticReader:
        return StaticReader(dict(files or {}))

    return _make


@pytest.fixture
def write_project(tmp_path: Path):
    def _write(files: dict[str, str]) -> Path:
        for rel, text in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def project_reader(tmp_path: Path) -> ProjectFileReader:
    return ProjectFileReader(tmp_path)
