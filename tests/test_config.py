"""
Tests for EngineConfig.
"""

from __future__ import annotations

import pytest

from passcheck import __version__
from passcheck.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, EngineConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PASSCHECK_API_URL", "PASSCHECK_TIMEOUT", "PASSCHECK_USER_AGENT", "PASSCHECK_ADD_PADDING"):
        monkeypatch.delenv(name, raising=False)


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_default_values(self) -> None:
        config = EngineConfig()

        assert config.api_url == DEFAULT_API_URL
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.user_agent == f"passcheck/{__version__}"
        assert config.add_padding is True
        assert config.breach_penalty == 2
        assert config.max_connections == 100
        assert config.validate() == []

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PASSCHECK_API_URL", "http://localhost:8080/")
        monkeypatch.setenv("PASSCHECK_TIMEOUT", "2.5")
        monkeypatch.setenv("PASSCHECK_USER_AGENT", "audit-bot/2")
        monkeypatch.setenv("PASSCHECK_ADD_PADDING", "no")

        config = EngineConfig.from_env()

        assert config.api_url == "http://localhost:8080"
        assert config.timeout == 2.5
        assert config.user_agent == "audit-bot/2"
        assert config.add_padding is False

    @pytest.mark.parametrize("value", ["soon", "0", "-1", "nan", "inf", "-inf"])
    def test_invalid_timeout_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, value: str
    ) -> None:
        monkeypatch.setenv("PASSCHECK_TIMEOUT", value)

        config = EngineConfig.from_env()

        assert config.timeout == DEFAULT_TIMEOUT
        assert config.validate() == []
        assert "PASSCHECK_TIMEOUT" in caplog.text

    @pytest.mark.parametrize("timeout", [0, -5.0, float("nan"), float("inf")])
    def test_validate_rejects_unbounded_timeout(self, timeout: float) -> None:
        errors = EngineConfig(timeout=timeout).validate()

        assert errors == ["Timeout must be a positive number of seconds"]

    def test_validate_rejects_zero_connections(self) -> None:
        assert EngineConfig(max_connections=0).validate() == ["Max connections must be at least 1"]

    def test_validate(self) -> None:
        config = EngineConfig(api_url="ftp://example.com", timeout=0, breach_penalty=-1)

        errors = config.validate()

        assert len(errors) == 3
        assert any("http" in e for e in errors)

    def test_to_dict(self) -> None:
        data = EngineConfig().to_dict()

        assert set(data) == {"api_url", "timeout", "user_agent", "add_padding", "max_connections", "breach_penalty"}
