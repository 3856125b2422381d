import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def write_notes(tmp_path):
    """Write {rel_path: markdown} into a throwaway notes root and return it."""
    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "notes"
        root.mkdir(exist_ok=True)
        for rel_path, text in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
        return root
    return _write


@pytest.fixture(autouse=True)
def _no_notes_env(monkeypatch):
    monkeypatch.delenv("STUDYGUIDE_NOTES_DIR", raising=False)


@pytest.fixture
def repo_notes() -> Path:
    return Path(__file__).parent.parent / "notes"
