# tests/conftest.py
from pathlib import Path
import os

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


def pytest_sessionstart(session):
    # Developer shells may carry overrides; tests assume the shipped defaults.
    for key in list(os.environ):
        if key.startswith("WC_"):
            os.environ.pop(key, None)


@pytest.fixture
def default_config_path() -> str:
    return str(REPO_ROOT / "configs" / "default.yaml")


@pytest.fixture
def text_file(tmp_path):
    """Write `content` verbatim (no newline translation) and return the path as str."""
    def _make(content: str, name: str = "input.txt") -> str:
        p = tmp_path / name
        with open(p, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return str(p)
    return _make
