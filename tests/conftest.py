"""Shared pytest fixtures for structmodel tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from structmodel.config.settings import StructSettings
from structmodel.services.model_io import ModelIO


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep STRUCTMODEL_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("STRUCTMODEL_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Generator[None]:
    """Undo handler and level changes made by CLI invocations."""
    pkg = logging.getLogger("structmodel")
    handlers = pkg.handlers[:]
    level = pkg.level
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> StructSettings:
    """Default settings, independent of env vars and TOML files."""
    return StructSettings()


@pytest.fixture
def model_io(settings: StructSettings) -> ModelIO:
    """A ModelIO bound to default settings."""
    return ModelIO(settings)


@pytest.fixture
def json_path(tmp_path: Path) -> Path:
    """A fresh, not-yet-existing ``.json`` path inside a temp directory."""
    return tmp_path / "model.json"


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so relative paths and config discovery stay local.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
