"""
Password Utilities
==================
Utility functions for password management.
"""

from typing import Optional, Union

from ..exceptions import TokenError
from .config import DEFAULT_CONFIG, HashConfig
from .hasher import VERSION
from .record import HashRecord


def needs_rehash(
    hash: Union[str, HashRecord],
    config: Optional[HashConfig] = None,
) -> bool:
    """
    Check if a hash should be re-computed.

    Returns True if:
    - The token cannot be parsed
    - Its cost parameters, salt or digest length differ from the config
    - It was produced by a different Argon2 version

    Args:
        hash: Token or already parsed record
        config: Target parameters (default parameters if omitted)

    Returns:
        True if the hash should be re-computed
    """
    if not hash:
        return True

    config = config or DEFAULT_CONFIG

    if isinstance(hash, HashRecord):
        record = hash
    else:
        try:
            record = HashRecord.deserialize(hash)
        except TokenError:
            return True

    return (
        record.time_cost != config.time_cost
        or record.memory_cost != config.memory_cost
        or record.parallelism != config.parallelism
        or len(record.salt) != config.salt_length
        or len(record.digest) != config.digest_length
        or record.version != VERSION
    )
