"""Tests for docver config module."""

import logging
from pathlib import Path

import pytest

from docver.config import (
    get_env_var,
    resolve_store_paths,
    resolve_version_path,
    validate_env_var,
)
from docver.config.settings import get_log_level
from docver.exceptions import ConfigurationError


def test_defaults():
    assert resolve_store_paths() == (Path(".docver.hash"), Path("version.tex"))


def test_env_overrides_default(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCVER_HASH_FILE", str(tmp_path / "h"))
    monkeypatch.setenv("DOCVER_VERSION_FILE", str(tmp_path / "v"))

    assert resolve_store_paths() == (tmp_path / "h", tmp_path / "v")


def test_explicit_overrides_env(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCVER_VERSION_FILE", str(tmp_path / "env.tex"))

    _, version_path = resolve_store_paths(version_file=tmp_path / "cli.tex")
    assert version_path == tmp_path / "cli.tex"


def test_same_file_for_both_stores_rejected(tmp_path):
    with pytest.raises(ConfigurationError):
        resolve_store_paths(tmp_path / "x", tmp_path / "x")


def test_validate_env_var():
    assert validate_env_var("DOCVER_LOG_LEVEL", "debug") == (True, None)
    assert validate_env_var("DOCVER_LOG_LEVEL", None) == (True, None)
    assert validate_env_var("UNRELATED", "anything") == (True, None)

    valid, error = validate_env_var("DOCVER_LOG_LEVEL", "chatty")
    assert not valid
    assert "chatty" in error

    valid, _ = validate_env_var("DOCVER_HASH_FILE", "  ")
    assert not valid


def test_get_env_var_invalid_raises(monkeypatch):
    monkeypatch.setenv("DOCVER_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        get_env_var("DOCVER_LOG_LEVEL")
    assert get_env_var("DOCVER_LOG_LEVEL", validate=False) == "chatty"


def test_log_level(monkeypatch):
    assert get_log_level() == logging.INFO
    monkeypatch.setenv("DOCVER_LOG_LEVEL", "warning")
    assert get_log_level() == logging.WARNING


def test_resolve_version_path(monkeypatch, tmp_path):
    assert resolve_version_path() == Path("version.tex")

    monkeypatch.setenv("DOCVER_VERSION_FILE", str(tmp_path / "env.tex"))
    monkeypatch.setenv("DOCVER_HASH_FILE", "")
    assert resolve_version_path() == tmp_path / "env.tex"
    assert resolve_version_path(tmp_path / "cli.tex") == tmp_path / "cli.tex"
