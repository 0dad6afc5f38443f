"""Tests for the example CLI command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from structmodel.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestExampleCommand:
    def test_default_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["example"])
        assert result.exit_code == 0
        assert "Successfully serialized to JSON" in result.output
        assert "Micah has been stopped in his tracks" in result.output
        assert (tmp_path / "user.json").exists()

    def test_explicit_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "arthur.json"
        result = cli_runner.invoke(cli, ["example", str(target)])
        assert result.exit_code == 0
        assert target.exists()
