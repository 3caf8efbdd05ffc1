"""Unit tests for validate and show commands.

Tests CLI behavior using Click's CliRunner for isolated, fast testing.
Tests use the AAA pattern (Arrange-Act-Assert) for clarity.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cachecompat import __version__
from cachecompat.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def input_file(tmp_path: Path, valid_text: str) -> Path:
    """Valid test input file with one account."""
    path = tmp_path / "input.json"
    path.write_text(valid_text, encoding="utf-8")
    return path


@pytest.fixture
def no_users_file(tmp_path: Path, valid_payload: dict) -> Path:
    """Valid test input file without LabUserDatas."""
    del valid_payload["LabUserDatas"]
    path = tmp_path / "no_users.json"
    path.write_text(json.dumps(valid_payload), encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for cachecompat validate."""

    def test_valid_input(self, runner: CliRunner, input_file: Path):
        # Act
        result = runner.invoke(cli, ["validate", str(input_file)])

        # Assert
        assert result.exit_code == 0
        assert f"✓ Test input valid: {input_file}" in result.output
        assert "Scope: User.Read" in result.output
        assert "Cache file: /tmp/cache.bin" in result.output
        assert "1 account defined" in result.output

    def test_malformed_json(self, runner: CliRunner, tmp_path: Path):
        # Arrange
        path = tmp_path / "broken.json"
        path.write_text('{"Scope": ', encoding="utf-8")

        # Act
        result = runner.invoke(cli, ["validate", str(path)])

        # Assert
        assert result.exit_code == 1
        assert "✗ Invalid JSON in test input" in result.output

    def test_missing_field(self, runner: CliRunner, tmp_path: Path, valid_payload: dict):
        # Arrange
        del valid_payload["ResultsFilePath"]
        path = tmp_path / "input.json"
        path.write_text(json.dumps(valid_payload), encoding="utf-8")

        # Act
        result = runner.invoke(cli, ["validate", str(path)])

        # Assert
        assert result.exit_code == 1
        assert "ResultsFilePath" in result.output

    def test_no_users_allowed_by_default(self, runner: CliRunner, no_users_file: Path):
        # Act
        result = runner.invoke(cli, ["validate", str(no_users_file)])

        # Assert
        assert result.exit_code == 0
        assert "0 accounts defined" in result.output

    def test_require_users_flag(self, runner: CliRunner, no_users_file: Path):
        # Act
        result = runner.invoke(cli, ["validate", str(no_users_file), "--require-users"])

        # Assert
        assert result.exit_code == 1
        assert "LabUserDatas" in result.output

    def test_require_users_from_env(
        self, runner: CliRunner, no_users_file: Path, monkeypatch: pytest.MonkeyPatch
    ):
        # Arrange
        monkeypatch.setenv("CACHECOMPAT_REQUIRE_USERS", "1")

        # Act
        result = runner.invoke(cli, ["validate", str(no_users_file)])

        # Assert
        assert result.exit_code == 1

    def test_flag_overrides_env(self, runner: CliRunner, no_users_file: Path, monkeypatch: pytest.MonkeyPatch):
        # Arrange
        monkeypatch.setenv("CACHECOMPAT_REQUIRE_USERS", "1")

        # Act
        result = runner.invoke(cli, ["validate", str(no_users_file), "--allow-no-users"])

        # Assert
        assert result.exit_code == 0

    def test_strict_upn_flag(self, runner: CliRunner, tmp_path: Path, valid_payload: dict):
        # Arrange
        valid_payload["LabUserDatas"][0]["Upn"] = "labuser"
        path = tmp_path / "input.json"
        path.write_text(json.dumps(valid_payload), encoding="utf-8")

        # Act
        lenient = runner.invoke(cli, ["validate", str(path)])
        strict = runner.invoke(cli, ["validate", str(path), "--strict-upn"])

        # Assert
        assert lenient.exit_code == 0
        assert strict.exit_code == 1
        assert "LabUserDatas[0].Upn" in strict.output

    def test_nonexistent_path(self, runner: CliRunner, tmp_path: Path):
        # Act
        result = runner.invoke(cli, ["validate", str(tmp_path / "missing.json")])

        # Assert
        assert result.exit_code == 2


class TestShowCommand:
    """Tests for cachecompat show."""

    def test_shows_wire_keys_with_password_redacted(self, runner: CliRunner, tmp_path: Path, valid_payload: dict):
        # Arrange
        valid_payload["LabUserDatas"][0]["Password"] = "s3cret-value"
        path = tmp_path / "input.json"
        path.write_text(json.dumps(valid_payload), encoding="utf-8")

        # Act
        result = runner.invoke(cli, ["show", str(path)])

        # Assert
        assert result.exit_code == 0
        assert "s3cret-value" not in result.output
        shown = json.loads(result.output)
        assert shown["Scope"] == "User.Read"
        assert shown["LabUserDatas"][0] == {
            "Upn": "a@b.com",
            "Password": "***",
            "Authority": "https://login.example.com/tenant",
            "ClientId": "cid",
        }

    def test_invalid_input(self, runner: CliRunner, tmp_path: Path):
        # Arrange
        path = tmp_path / "input.json"
        path.write_text("[]", encoding="utf-8")

        # Act
        result = runner.invoke(cli, ["show", str(path)])

        # Assert
        assert result.exit_code == 1
        assert "✗" in result.output


class TestGroup:
    """Tests for the top-level command group."""

    def test_version(self, runner: CliRunner):
        # Act
        result = runner.invoke(cli, ["--version"])

        # Assert
        assert result.exit_code == 0
        assert f"cachecompat {__version__}" in result.output

    def test_help_without_command(self, runner: CliRunner):
        # Act
        result = runner.invoke(cli, [])

        # Assert
        assert result.exit_code == 0
        assert "validate" in result.output
        assert "show" in result.output
