"""
Pwned Passwords range API client.

Implements the k-anonymity password lookup:
- SHA-1 the password locally
- Send only the first 5 hex characters of the digest
- Match the remaining 35 characters against the returned range

Lookups fail open: any transport or parse failure is reported as
"not breached" so that scoring keeps working when the API is down.
A network outage and a clean password therefore look the same to
callers of the merged verdict.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import hashlib
import logging
import re

import aiohttp

from passcheck.config import EngineConfig
from passcheck.hibp.models import BreachResult, HashRangeEntry

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 5
SHA1_HEX_RE = re.compile(r"^[0-9a-fA-F]{40}$")


def sha1_hex(password: str) -> str:
    """Return the lowercase SHA-1 hex digest of the UTF-8 encoded password."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest()


def split_digest(digest: str) -> tuple[str, str]:
    """Split a 40 char digest into the (prefix, suffix) pair, both uppercased."""
    digest = digest.upper()
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def parse_range_response(text: str) -> list[HashRangeEntry]:
    """Parse a range response body into entries.

    Accepts both \\n and \\r\\n line endings and skips blank lines.

    Raises:
        ValueError: If a non-blank line is not a SUFFIX:COUNT record
    """
    return [HashRangeEntry.from_line(line) for line in text.splitlines() if line.strip()]


class PwnedPasswordsClient:
    """Client for the Pwned Passwords range API.

    Usable as an async context manager, or directly with an explicit
    ``close()`` when done. The session is created lazily.
    """

    def __init__(self, config: EngineConfig | None = None):
        """Initialize the client.

        Args:
            config: Engine configuration (default: loaded from environment)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or EngineConfig.from_env()
        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid engine configuration: {'; '.join(errors)}")
        self._session: aiohttp.ClientSession | None = None
        # Requests waiting for a connection must not run down their timeout
        self._slots = asyncio.Semaphore(self.config.max_connections)

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(limit=self.config.max_connections)
            self._session = aiohttp.ClientSession(connector=connector)
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "PwnedPasswordsClient":
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _fetch_range(self, prefix: str) -> str:
        """Fetch the raw range body for a hash prefix.

        Raises:
            aiohttp.ClientError: On connection failure or non-2xx status
            asyncio.TimeoutError: If the request exceeds the configured timeout
        """
        session = await self._ensure_session()

        headers = {"User-Agent": self.config.user_agent}
        if self.config.add_padding:
            headers["Add-Padding"] = "true"

        url = f"{self.config.api_url}/range/{prefix}"
        logger.debug(f"Requesting hash range {prefix}")

        async with self._slots:
            async with session.get(
                url,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                raise_for_status=True,
            ) as response:
                return await response.text()

    async def _lookup(self, digest: str) -> BreachResult:
        prefix, suffix = split_digest(digest)

        try:
            body = await self._fetch_range(prefix)
            entries = parse_range_response(body)
        except asyncio.TimeoutError:
            logger.warning(f"Breach lookup for range {prefix} timed out")
            return BreachResult(hash_prefix=prefix, error="Request timeout")
        except aiohttp.ClientResponseError as e:
            logger.warning(f"Breach lookup for range {prefix} failed: HTTP {e.status}")
            return BreachResult(hash_prefix=prefix, error=f"HTTP {e.status}")
        except aiohttp.ClientError as e:
            logger.warning(f"Breach lookup for range {prefix} failed: {e}")
            return BreachResult(hash_prefix=prefix, error=f"Request failed: {str(e)}")
        except ValueError as e:
            logger.warning(f"Malformed range response for {prefix}: {e}")
            return BreachResult(hash_prefix=prefix, error=f"Malformed response: {e}")

        for entry in entries:
            # Padding entries carry a zero count
            if entry.suffix == suffix and entry.count > 0:
                return BreachResult(
                    is_breached=True,
                    breach_count=entry.count,
                    hash_prefix=prefix,
                )

        return BreachResult(hash_prefix=prefix)

    async def check_breach(self, password: str) -> BreachResult:
        """Check if a password has been exposed in data breaches.

        Uses k-anonymity model - only the first 5 characters of the
        SHA-1 hash are sent to the API. The full password never leaves
        this system.

        Args:
            password: Password to check (NOT stored or logged)

        Returns:
            BreachResult with exposure count

        Raises:
            ValueError: If password is empty
        """
        if not password:
            raise ValueError("Cannot check an empty password")

        return await self._lookup(sha1_hex(password))

    async def check_hash(self, sha1_hash: str) -> BreachResult:
        """Check a pre-computed SHA-1 hash against Pwned Passwords.

        Args:
            sha1_hash: Full SHA-1 hash of the password (40 hex chars)

        Returns:
            BreachResult with exposure count

        Raises:
            ValueError: If sha1_hash is not a 40 character hex string
        """
        sha1_hash = sha1_hash.strip()
        if not SHA1_HEX_RE.match(sha1_hash):
            raise ValueError("SHA-1 hash must be 40 hexadecimal characters")

        return await self._lookup(sha1_hash)
