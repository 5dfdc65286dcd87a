"""
Rule-based password strength scoring.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re

from passcheck.config import DEFAULT_BREACH_PENALTY
from passcheck.hibp.models import BreachResult
from passcheck.strength.models import ScoreResult, Verdict, categorize

MIN_LENGTH = 8
LONG_LENGTH = 12

SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

COMMON_PASSWORDS = frozenset({
    "password",
    "123456",
    "qwerty",
    "admin",
    "letmein",
    "welcome",
})

UPPERCASE_RE = re.compile(r"[A-Z]")
LOWERCASE_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"[0-9]")
SPECIAL_RE = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")
# Same character three or more times in a row
REPEAT_RE = re.compile(r"(.)\1{2,}")

FEEDBACK_LENGTH = f"Password should be at least {MIN_LENGTH} characters long"
FEEDBACK_UPPERCASE = "Add uppercase letters"
FEEDBACK_LOWERCASE = "Add lowercase letters"
FEEDBACK_DIGIT = "Add numbers"
FEEDBACK_SPECIAL = "Add special characters"
FEEDBACK_REPEAT = "Avoid repeated characters"
FEEDBACK_COMMON = "This is a commonly used password"


def evaluate(password: str) -> ScoreResult:
    """Score a candidate password.

    Every rule runs independently. The score can go negative before
    category mapping; negative scores are weak. A denylisted password
    is forced to zero but keeps the hints collected so far.

    Args:
        password: Candidate password (may be empty)

    Returns:
        ScoreResult with score, ordered feedback and category
    """
    feedback: list[str] = []
    score = 0

    if len(password) < MIN_LENGTH:
        feedback.append(FEEDBACK_LENGTH)
    else:
        score += 2 if len(password) >= LONG_LENGTH else 1

    for pattern, hint in (
        (UPPERCASE_RE, FEEDBACK_UPPERCASE),
        (LOWERCASE_RE, FEEDBACK_LOWERCASE),
        (DIGIT_RE, FEEDBACK_DIGIT),
    ):
        if pattern.search(password):
            score += 1
        else:
            feedback.append(hint)

    if SPECIAL_RE.search(password):
        score += 2
    else:
        feedback.append(FEEDBACK_SPECIAL)

    # One penalty however many runs there are
    if REPEAT_RE.search(password):
        score -= 1
        feedback.append(FEEDBACK_REPEAT)

    if password.lower() in COMMON_PASSWORDS:
        score = 0
        feedback.append(FEEDBACK_COMMON)

    return ScoreResult.from_score(score, feedback)


def breach_feedback(count: int) -> str:
    return f"This password has been exposed in {count:,} data breaches"


def merge_verdict(
    result: ScoreResult,
    breach: BreachResult | None = None,
    penalty: int = DEFAULT_BREACH_PENALTY,
) -> Verdict:
    """Merge a score with an optional breach lookup.

    A breached password loses ``penalty`` points (floored at 0), gains a
    hint with the exposure count, and has its category recomputed.
    Skipped or failed lookups leave the score untouched.
    """
    if breach is None or not breach.is_breached:
        return Verdict(
            score=result.score,
            feedback=result.feedback,
            category=result.category,
            color=result.color,
        )

    score = max(0, result.score - penalty)
    category = categorize(score)
    return Verdict(
        score=score,
        feedback=result.feedback + (breach_feedback(breach.occurrences),),
        category=category,
        color=category.color,
        is_breached=True,
        breach_count=breach.breach_count,
    )
