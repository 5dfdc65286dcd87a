"""
Password strength scoring and generation.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from passcheck.strength.models import (
    Category,
    ScoreResult,
    Verdict,
    categorize,
)
from passcheck.strength.scorer import (
    COMMON_PASSWORDS,
    evaluate,
    merge_verdict,
)
from passcheck.strength.generator import (
    InvalidLengthError,
    generate,
)

__all__ = [
    "Category",
    "ScoreResult",
    "Verdict",
    "categorize",
    "COMMON_PASSWORDS",
    "evaluate",
    "merge_verdict",
    "InvalidLengthError",
    "generate",
]
