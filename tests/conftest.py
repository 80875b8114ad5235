"""Shared pytest fixtures for docver tests."""

import logging

import pytest

from docver import error_handling
from docver.core import StorePair


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's DOCVER_* variables out of the tests."""
    for name in ("DOCVER_HASH_FILE", "DOCVER_VERSION_FILE", "DOCVER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_docver_logger():
    """Drop handlers added by setup_logging between tests."""
    yield
    logger = logging.getLogger("docver")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    error_handling._quiet = False


@pytest.fixture
def stores(tmp_path):
    """A store pair in a temporary directory; neither file exists yet."""
    return StorePair(
        hash_path=tmp_path / ".docver.hash",
        version_path=tmp_path / "version.tex",
    )


@pytest.fixture
def sources(tmp_path):
    """Two observed files, A="x" and B="y"."""
    a = tmp_path / "a.tex"
    b = tmp_path / "b.tex"
    a.write_bytes(b"x")
    b.write_bytes(b"y")
    return [a, b]
