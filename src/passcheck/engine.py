"""
Password evaluation engine.

Composes the scorer, the breach lookup and the generator into the
surface consumed by user interfaces.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
from typing import Iterable

from passcheck.config import EngineConfig
from passcheck.hibp.client import PwnedPasswordsClient
from passcheck.hibp.models import BreachResult
from passcheck.strength.generator import DEFAULT_LENGTH
from passcheck.strength.generator import generate as _generate
from passcheck.strength.models import ScoreResult, Verdict
from passcheck.strength.scorer import evaluate as _evaluate
from passcheck.strength.scorer import merge_verdict

logger = logging.getLogger(__name__)


def evaluate(password: str) -> ScoreResult:
    """Score a password without any network access."""
    return _evaluate(password)


def generate(length: int = DEFAULT_LENGTH) -> str:
    """Generate a random password covering all character classes."""
    return _generate(length)


async def check_breach(
    password: str,
    client: PwnedPasswordsClient | None = None,
) -> BreachResult:
    """Look a password up in the breach corpus.

    Args:
        password: Non-empty password
        client: Client to reuse (default: a one-off client from environment config)
    """
    if client is not None:
        return await client.check_breach(password)

    async with PwnedPasswordsClient() as own_client:
        return await own_client.check_breach(password)


async def evaluate_with_breach(
    password: str,
    client: PwnedPasswordsClient | None = None,
) -> Verdict:
    """Score a password and merge in its breach exposure.

    Empty passwords skip the breach lookup. Lookup failures are treated
    as not breached.
    """
    result = _evaluate(password)
    if not password:
        return merge_verdict(result)

    penalty = client.config.breach_penalty if client else EngineConfig().breach_penalty
    breach = await check_breach(password, client)
    return merge_verdict(result, breach, penalty=penalty)


async def evaluate_many(
    passwords: Iterable[str],
    client: PwnedPasswordsClient | None = None,
) -> list[Verdict]:
    """Evaluate several passwords concurrently over one client.

    Results are returned in input order.
    """
    passwords = list(passwords)

    if client is not None:
        return list(await asyncio.gather(*(evaluate_with_breach(p, client) for p in passwords)))

    async with PwnedPasswordsClient() as own_client:
        logger.debug(f"Evaluating {len(passwords)} passwords")
        return list(await asyncio.gather(*(evaluate_with_breach(p, own_client) for p in passwords)))


def evaluate_with_breach_sync(password: str, config: EngineConfig | None = None) -> Verdict:
    """Synchronous wrapper for evaluate_with_breach.

    Args:
        password: Password to evaluate
        config: Engine configuration (default: loaded from environment)

    Returns:
        Verdict
    """
    async def _check():
        async with PwnedPasswordsClient(config) as client:
            return await evaluate_with_breach(password, client)

    return asyncio.run(_check())
