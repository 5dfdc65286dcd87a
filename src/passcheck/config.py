"""
Configuration for the password checking engine.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Any

from passcheck import __version__

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.pwnedpasswords.com"
DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_BREACH_PENALTY = 2
DEFAULT_MAX_CONNECTIONS = 100


@dataclass
class EngineConfig:
    """Configuration for breach lookups and verdict merging."""

    # Pwned Passwords range API
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = field(default_factory=lambda: f"passcheck/{__version__}")
    add_padding: bool = True  # Ask the API to pad responses with count=0 decoys
    max_connections: int = DEFAULT_MAX_CONNECTIONS  # Concurrent range requests per client

    # Score deducted from a breached password
    breach_penalty: int = DEFAULT_BREACH_PENALTY

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Load configuration from environment variables."""
        timeout_str = os.environ.get("PASSCHECK_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError:
                timeout = math.nan
            # Zero or negative disables the aiohttp timeout entirely
            if not math.isfinite(timeout) or timeout <= 0:
                logger.warning(f"Ignoring invalid PASSCHECK_TIMEOUT={timeout_str!r}")
                timeout = DEFAULT_TIMEOUT

        config = cls(
            api_url=os.environ.get("PASSCHECK_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=timeout,
            add_padding=os.environ.get("PASSCHECK_ADD_PADDING", "true").lower() in ("true", "yes", "1"),
        )

        user_agent = os.environ.get("PASSCHECK_USER_AGENT")
        if user_agent:
            config.user_agent = user_agent

        return config

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = []

        if not self.api_url.startswith(("http://", "https://")):
            errors.append("API URL must start with http:// or https://")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            errors.append("Timeout must be a positive number of seconds")
        if self.max_connections < 1:
            errors.append("Max connections must be at least 1")
        if self.breach_penalty < 0:
            errors.append("Breach penalty cannot be negative")

        return errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "api_url": self.api_url,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
            "add_padding": self.add_padding,
            "max_connections": self.max_connections,
            "breach_penalty": self.breach_penalty,
        }
