"""
Sync Password Operations
========================
Token-level hashing and verification for non-async contexts.
"""

from typing import Optional, Tuple, Union

import structlog
from argon2.exceptions import HashingError

from ..exceptions import TokenError
from .config import HashConfig
from .record import HashRecord
from .utils import needs_rehash

logger = structlog.get_logger(__name__)


def hash_password_sync(password: Union[str, bytes], config: Optional[HashConfig] = None) -> str:
    """
    Hash a password and return its token.

    Args:
        password: Plain text password to hash
        config: Optional hashing parameters

    Returns:
        Argon2id token (includes algorithm, parameters, salt, and hash)
    """
    return HashRecord.new(password, config=config).serialize()


def verify_password_sync(password: Union[str, bytes], hash: str) -> bool:
    """
    Verify a password against an Argon2id token.

    Tokens that cannot be parsed or hashed with never verify.
    """
    if not password or not hash:
        return False

    try:
        record = HashRecord.deserialize(hash)
        return record.compare(password)
    except (TokenError, HashingError):
        return False


def verify_and_upgrade_sync(
    password: Union[str, bytes],
    hash: str,
    config: Optional[HashConfig] = None,
) -> Tuple[bool, Optional[str]]:
    """
    Verify password and return a new token if the stored one is outdated.

    Args:
        password: Plain text password
        hash: Existing Argon2id token
        config: Current hashing parameters (defaults if omitted)

    Returns:
        Tuple of (is_valid, new_hash_or_none)
    """
    if not verify_password_sync(password, hash):
        return False, None

    if needs_rehash(hash, config):
        logger.info("Argon2id hash parameters outdated, rehashing")
        return True, hash_password_sync(password, config)

    return True, None
