"""
passcheck - password strength, breach exposure and generation.

Scores candidate passwords against a fixed rule set, checks them
against the Have I Been Pwned corpus with a k-anonymity range lookup,
and generates strong replacements.

Breach lookups fail open: when the API cannot be reached the password
is reported as not breached, which is indistinguishable from a clean
password in the merged verdict. ``BreachResult.error`` carries the
failure reason for callers that need to tell the two apart.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.0.0"

from passcheck.engine import (
    check_breach,
    evaluate,
    evaluate_many,
    evaluate_with_breach,
    evaluate_with_breach_sync,
    generate,
)
from passcheck.config import EngineConfig
from passcheck.hibp import BreachResult, HashRangeEntry, PwnedPasswordsClient
from passcheck.strength import Category, InvalidLengthError, ScoreResult, Verdict

__all__ = [
    "__version__",
    "check_breach",
    "evaluate",
    "evaluate_many",
    "evaluate_with_breach",
    "evaluate_with_breach_sync",
    "generate",
    "EngineConfig",
    "BreachResult",
    "HashRangeEntry",
    "PwnedPasswordsClient",
    "Category",
    "InvalidLengthError",
    "ScoreResult",
    "Verdict",
]
