"""
Argon2id Core Library
=====================
Argon2id password hash records, their text tokens, and verification.
"""

__version__ = "0.1.0"

# Password hashing
from argon2id_core.password import (
    HashRecord,
    HashConfig,
    DEFAULT_CONFIG,
    new,
    parse,
    needs_rehash,
    hash_password,
    verify_password,
    verify_and_upgrade,
    hash_password_sync,
    verify_password_sync,
    verify_and_upgrade_sync,
)

# Pair lists
from argon2id_core.pairs import (
    PairKind,
    parse_pairs,
    parse_str_pairs,
    parse_uint_pairs,
)

# Exceptions
from argon2id_core.exceptions import (
    Argon2idError,
    RandomSourceError,
    TokenError,
    MalformedTokenError,
    UnsupportedAlgorithmError,
    MissingKeyError,
    MissingVersionError,
    MissingMemoryError,
    MissingIterationsError,
    MissingParallelismError,
    InvalidPairError,
    InvalidNumberError,
    InvalidParameterError,
    EncodingError,
)

__all__ = [
    # Password hashing
    "HashRecord",
    "HashConfig",
    "DEFAULT_CONFIG",
    "new",
    "parse",
    "needs_rehash",
    "hash_password",
    "verify_password",
    "verify_and_upgrade",
    "hash_password_sync",
    "verify_password_sync",
    "verify_and_upgrade_sync",
    # Pair lists
    "PairKind",
    "parse_pairs",
    "parse_str_pairs",
    "parse_uint_pairs",
    # Exceptions
    "Argon2idError",
    "RandomSourceError",
    "TokenError",
    "MalformedTokenError",
    "UnsupportedAlgorithmError",
    "MissingKeyError",
    "MissingVersionError",
    "MissingMemoryError",
    "MissingIterationsError",
    "MissingParallelismError",
    "InvalidPairError",
    "InvalidNumberError",
    "InvalidParameterError",
    "EncodingError",
]
