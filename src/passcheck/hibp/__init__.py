"""
Pwned Passwords integration module.

Checks passwords against the Have I Been Pwned breach corpus using
the k-anonymity range API. Only a 5 character SHA-1 prefix ever
leaves the machine.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from passcheck.hibp.models import (
    BreachResult,
    HashRangeEntry,
    RiskLevel,
)
from passcheck.hibp.client import (
    PwnedPasswordsClient,
    parse_range_response,
    sha1_hex,
    split_digest,
)

__all__ = [
    "PwnedPasswordsClient",
    "BreachResult",
    "HashRangeEntry",
    "RiskLevel",
    "parse_range_response",
    "sha1_hex",
    "split_digest",
]
