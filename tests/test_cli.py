"""
Tests for the passcheck command-line interface.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from passcheck.cli import main
from passcheck.hibp.client import PwnedPasswordsClient
from passcheck.hibp.models import BreachResult
from passcheck.strength.generator import DIGITS, LOWERCASE, SPECIAL, UPPERCASE


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def breached_lookup():
    """Every lookup reports 42 exposures."""
    result = BreachResult(is_breached=True, breach_count=42, hash_prefix="ABCDE")
    with patch.object(PwnedPasswordsClient, "check_breach", new=AsyncMock(return_value=result)) as mocked:
        yield mocked


@pytest.fixture
def clean_lookup():
    result = BreachResult(hash_prefix="ABCDE")
    with patch.object(PwnedPasswordsClient, "check_breach", new=AsyncMock(return_value=result)) as mocked:
        yield mocked


class TestCheckCommand:
    """Tests for `passcheck check`."""

    def test_offline_json(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["check", "--offline", "--json", "-p", "Aa1!Aa1!Aa1!"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["score"] == 7
        assert data["category"] == "strong"
        assert data["is_breached"] is False

    def test_breached_json(self, runner: CliRunner, breached_lookup: AsyncMock) -> None:
        result = runner.invoke(main, ["check", "--json", "-p", "Aa1!Aa1!Aa1!"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["score"] == 5
        assert data["breach_count"] == 42
        assert data["feedback"][-1] == "This password has been exposed in 42 data breaches"
        breached_lookup.assert_awaited_once()

    def test_prompts_for_password(self, runner: CliRunner, clean_lookup: AsyncMock) -> None:
        result = runner.invoke(main, ["check"], input="abc\n")

        assert result.exit_code == 0, result.output
        assert "WEAK" in result.output
        assert "Add uppercase letters" in result.output

    def test_empty_password_skipped(self, runner: CliRunner, clean_lookup: AsyncMock) -> None:
        result = runner.invoke(main, ["check", "-p", ""])

        assert result.exit_code == 0
        assert "Nothing to check" in result.output
        clean_lookup.assert_not_awaited()


class TestBatchCommand:
    """Tests for `passcheck batch`."""

    def test_offline_batch(self, runner: CliRunner, tmp_path: Path) -> None:
        passwords_file = tmp_path / "passwords.txt"
        passwords_file.write_text("password\n\nAa1!Aa1!Aa1!\n")
        output = tmp_path / "results.json"

        result = runner.invoke(main, ["batch", str(passwords_file), "--offline", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Aa1!Aa1!Aa1!" not in result.output

        data = json.loads(output.read_text())
        assert [item["line"] for item in data] == [1, 3]
        assert data[0]["result"]["score"] == 0
        assert data[1]["result"]["category"] == "strong"

    def test_batch_with_lookup(self, runner: CliRunner, tmp_path: Path, breached_lookup: AsyncMock) -> None:
        passwords_file = tmp_path / "passwords.txt"
        passwords_file.write_text("one-password\nanother-password\n")

        result = runner.invoke(main, ["batch", str(passwords_file)])

        assert result.exit_code == 0, result.output
        assert "2/2 passwords found in breaches" in result.output
        assert breached_lookup.await_count == 2

    def test_empty_file(self, runner: CliRunner, tmp_path: Path) -> None:
        passwords_file = tmp_path / "passwords.txt"
        passwords_file.write_text("\n\n")

        result = runner.invoke(main, ["batch", str(passwords_file)])

        assert result.exit_code == 0
        assert "No passwords found" in result.output


class TestGenerateCommand:
    """Tests for `passcheck generate`."""

    def test_generate_count_and_length(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["generate", "--length", "20", "--count", "3"])

        assert result.exit_code == 0, result.output
        passwords = result.output.splitlines()
        assert len(passwords) == 3
        for password in passwords:
            assert len(password) == 20
            for charset in (UPPERCASE, LOWERCASE, DIGITS, SPECIAL):
                assert any(c in charset for c in password)

    def test_invalid_length(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["generate", "--length", "3"])

        assert result.exit_code == 2
        assert "at least 4" in result.output

    def test_generate_with_check(self, runner: CliRunner, clean_lookup: AsyncMock) -> None:
        result = runner.invoke(main, ["generate", "--count", "2", "--check"])

        assert result.exit_code == 0, result.output
        assert "Generated Passwords" in result.output
        assert clean_lookup.await_count == 2


class TestHibpCommands:
    """Tests for `passcheck hibp`."""

    def test_password_json(self, runner: CliRunner, breached_lookup: AsyncMock) -> None:
        result = runner.invoke(main, ["hibp", "password", "-p", "hunter2", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["breach_count"] == 42
        assert data["risk_level"] == "medium"

    def test_password_lookup_failure(self, runner: CliRunner) -> None:
        failed = BreachResult(error="Request timeout")
        with patch.object(PwnedPasswordsClient, "check_breach", new=AsyncMock(return_value=failed)):
            result = runner.invoke(main, ["hibp", "password", "-p", "hunter2"])

        assert result.exit_code == 1
        assert "Request timeout" in result.output

    def test_invalid_hash(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["hibp", "password", "--hash", "not-a-hash"])

        assert result.exit_code == 2
        assert "40 hexadecimal" in result.output

    def test_config(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PASSCHECK_TIMEOUT", "3.5")

        result = runner.invoke(main, ["hibp", "config"])

        assert result.exit_code == 0, result.output
        assert "3.5" in result.output
        assert "api.pwnedpasswords.com" in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "passcheck" in result.output
