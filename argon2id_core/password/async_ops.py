"""
Async Password Hashing
======================
Async-safe hashing and verification. Argon2id is memory-hard, so the work
runs in the default thread pool executor instead of on the event loop.
"""

import asyncio
from functools import partial
from typing import Optional, Tuple, Union

from .config import HashConfig
from .sync_ops import hash_password_sync, verify_and_upgrade_sync, verify_password_sync


async def hash_password(password: Union[str, bytes], config: Optional[HashConfig] = None) -> str:
    """
    Hash a password using Argon2id.

    Args:
        password: Plain text password to hash
        config: Optional hashing parameters

    Returns:
        Argon2id token (includes algorithm, parameters, salt, and hash)

    Example:
        >>> token = await hash_password("my_secure_password")
        >>> token[:10]
        '$argon2id$'
    """
    loop = asyncio.get_event_loop()

    # Run in executor to avoid blocking the event loop
    return await loop.run_in_executor(None, partial(hash_password_sync, password, config))


async def verify_password(password: Union[str, bytes], hash: str) -> bool:
    """
    Verify a password against an Argon2id token.

    Returns:
        True if password matches, False otherwise
    """
    if not password or not hash:
        return False

    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, verify_password_sync, password, hash)


async def verify_and_upgrade(
    password: Union[str, bytes],
    hash: str,
    config: Optional[HashConfig] = None,
) -> Tuple[bool, Optional[str]]:
    """
    Verify password and return new token if upgrade is needed.

    This is the recommended function for login flows.

    Example:
        >>> valid, new_hash = await verify_and_upgrade(password, stored_hash)
        >>> if valid and new_hash:
        >>>     await update_user_password_hash(user_id, new_hash)
    """
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(
        None, partial(verify_and_upgrade_sync, password, hash, config)
    )
