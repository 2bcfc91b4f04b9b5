"""
Argon2id Core - Password Hashing
================================
Argon2id hash records and their `$argon2id$...` text tokens.

- HashRecord: hash a secret, serialize/parse tokens, verify candidates
- HashConfig: parameters for new hashes (fixed defaults unless given)
- needs_rehash: spot tokens hashed with other parameters
- *_sync / async helpers: token-in, token-out hashing and verification
"""

# Re-export all public APIs
from .config import (
    HashConfig,
    DEFAULT_CONFIG,
    DEFAULT_SALT_LENGTH,
    DEFAULT_TIME_COST,
    DEFAULT_MEMORY_COST,
    DEFAULT_PARALLELISM,
    DEFAULT_DIGEST_LENGTH,
    SUPPORTED_ALGORITHM,
)
from .salt import generate_salt
from .hasher import VERSION, derive
from .record import HashRecord, new, parse
from .utils import needs_rehash
from .sync_ops import hash_password_sync, verify_password_sync, verify_and_upgrade_sync
from .async_ops import hash_password, verify_password, verify_and_upgrade

__all__ = [
    # Config
    "HashConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_SALT_LENGTH",
    "DEFAULT_TIME_COST",
    "DEFAULT_MEMORY_COST",
    "DEFAULT_PARALLELISM",
    "DEFAULT_DIGEST_LENGTH",
    "SUPPORTED_ALGORITHM",
    # Primitives
    "generate_salt",
    "VERSION",
    "derive",
    # Record
    "HashRecord",
    "new",
    "parse",
    # Utils
    "needs_rehash",
    # Sync Operations
    "hash_password_sync",
    "verify_password_sync",
    "verify_and_upgrade_sync",
    # Async Operations
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
]
