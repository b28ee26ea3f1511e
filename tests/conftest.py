"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

from include_block.config import reset_settings

# Keep test output free of log records from the package
logging.getLogger("include_block").setLevel(logging.WARNING)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give every test settings built from a known environment."""
    for variable in ("INCLUDE_ROOT", "INCLUDE_ENCODING", "INCLUDE_DEFAULT_DIALECT", "LOG_FILE", "DEBUG"):
        monkeypatch.delenv(variable, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding one sample document per dialect."""
    return FIXTURES_DIR


@pytest.fixture
def write_document(tmp_path):
    """Write a document into a temporary directory and return its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
