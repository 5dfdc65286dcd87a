"""
Data models for password strength scoring.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Strength category derived from the final score."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"

    @property
    def color(self) -> str:
        """Display colour token for the category."""
        return _CATEGORY_COLORS[self]


_CATEGORY_COLORS = {
    Category.WEAK: "#ef4444",
    Category.MODERATE: "#eab308",
    Category.STRONG: "#22c55e",
}


def categorize(score: int) -> Category:
    """Map a score to its category. Negative scores are weak."""
    if score <= 2:
        return Category.WEAK
    elif score <= 4:
        return Category.MODERATE
    else:
        return Category.STRONG


@dataclass(frozen=True)
class ScoreResult:
    """Result of scoring a candidate password."""

    score: int
    feedback: tuple[str, ...]
    category: Category
    color: str

    @classmethod
    def from_score(cls, score: int, feedback: list[str] | tuple[str, ...]) -> "ScoreResult":
        """Build a result, deriving category and colour from the score."""
        category = categorize(score)
        return cls(
            score=score,
            feedback=tuple(feedback),
            category=category,
            color=category.color,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "score": self.score,
            "feedback": list(self.feedback),
            "category": self.category.value,
            "color": self.color,
        }


@dataclass(frozen=True)
class Verdict:
    """Score merged with the breach lookup outcome."""

    score: int
    feedback: tuple[str, ...]
    category: Category
    color: str
    is_breached: bool = False
    breach_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "score": self.score,
            "feedback": list(self.feedback),
            "category": self.category.value,
            "color": self.color,
            "is_breached": self.is_breached,
            "breach_count": self.breach_count,
        }
