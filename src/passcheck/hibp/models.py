"""
Data models for Pwned Passwords range lookups.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from enum import Enum

HEX_RE = re.compile(r"^[0-9A-F]+$")


class RiskLevel(str, Enum):
    """Risk level based on password exposure."""

    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class HashRangeEntry:
    """A single SUFFIX:COUNT record from a range response."""

    suffix: str
    count: int

    @classmethod
    def from_line(cls, line: str) -> "HashRangeEntry":
        """Parse one response line.

        Raises:
            ValueError: If the line is not a HEX:COUNT record
        """
        hash_suffix, sep, count = line.strip().partition(":")
        hash_suffix = hash_suffix.strip().upper()
        if not sep or not hash_suffix:
            raise ValueError(f"Malformed range record: {line[:50]!r}")
        if not HEX_RE.match(hash_suffix):
            raise ValueError(f"Non-hex suffix in range record: {line[:50]!r}")
        return cls(suffix=hash_suffix, count=int(count.strip()))


@dataclass(frozen=True)
class BreachResult:
    """Result of checking a password against Pwned Passwords.

    A failed lookup is reported as not breached. The reason is kept in
    ``error`` for diagnostics only.
    """

    is_breached: bool = False
    breach_count: int | None = None
    checked_at: datetime = field(default_factory=datetime.now)
    error: str | None = None
    # Never store the actual password!
    hash_prefix: str = ""  # Only first 5 chars of SHA-1

    @property
    def occurrences(self) -> int:
        return self.breach_count or 0

    @property
    def risk_level(self) -> RiskLevel:
        """Determine risk level based on occurrences."""
        if self.occurrences == 0:
            return RiskLevel.SAFE
        elif self.occurrences < 10:
            return RiskLevel.LOW
        elif self.occurrences < 100:
            return RiskLevel.MEDIUM
        elif self.occurrences < 10000:
            return RiskLevel.HIGH
        else:
            return RiskLevel.CRITICAL

    @property
    def risk_description(self) -> str:
        """Get human-readable risk description."""
        descriptions = {
            RiskLevel.SAFE: "This password has not been found in any known data breaches.",
            RiskLevel.LOW: f"This password has been seen {self.occurrences} times in data breaches. Consider changing it.",
            RiskLevel.MEDIUM: f"This password has been seen {self.occurrences} times. You should change it.",
            RiskLevel.HIGH: f"This password has been seen {self.occurrences:,} times! Change it immediately.",
            RiskLevel.CRITICAL: f"This password has been seen {self.occurrences:,} times! It's extremely common and must be changed.",
        }
        return descriptions[self.risk_level]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "is_breached": self.is_breached,
            "breach_count": self.breach_count,
            "risk_level": self.risk_level.value,
            "risk_description": self.risk_description,
            "hash_prefix": self.hash_prefix,
            "checked_at": self.checked_at.isoformat(),
            "error": self.error,
        }
