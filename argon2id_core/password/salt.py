"""
Salt Generation
===============
Cryptographically random salts from the operating system entropy source.
"""

import os

from ..exceptions import RandomSourceError
from .config import DEFAULT_SALT_LENGTH


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> bytes:
    """
    Generate a random salt.

    Args:
        length: Number of random bytes

    Returns:
        The salt

    Raises:
        RandomSourceError: The entropy source failed
    """
    try:
        return os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"could not read {length} random bytes", cause=exc) from exc
