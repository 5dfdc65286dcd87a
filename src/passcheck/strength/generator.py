"""
Strong password generation.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import secrets as py_secrets
import string

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

ALL_CHARACTERS = UPPERCASE + LOWERCASE + DIGITS + SPECIAL
CHARACTER_CLASSES = (UPPERCASE, LOWERCASE, DIGITS, SPECIAL)

DEFAULT_LENGTH = 16
MIN_LENGTH = len(CHARACTER_CLASSES)

_random = py_secrets.SystemRandom()


class InvalidLengthError(ValueError):
    """Requested password length cannot hold every character class."""


def generate(length: int = DEFAULT_LENGTH) -> str:
    """Generate a random password.

    The result holds at least one uppercase letter, lowercase letter,
    digit and special character. Remaining positions are drawn from the
    union of all classes, then the whole sequence is shuffled so the
    mandatory characters sit at unpredictable positions.

    Args:
        length: Password length (minimum 4)

    Returns:
        Generated password

    Raises:
        InvalidLengthError: If length is not an integer >= 4
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"Password length must be an integer, got {length!r}")
    if length < MIN_LENGTH:
        raise InvalidLengthError(
            f"Password length must be at least {MIN_LENGTH} to include every character class"
        )

    chars = [py_secrets.choice(charset) for charset in CHARACTER_CLASSES]
    chars.extend(py_secrets.choice(ALL_CHARACTERS) for _ in range(length - MIN_LENGTH))

    # Fisher-Yates over the OS CSPRNG
    _random.shuffle(chars)

    return "".join(chars)
