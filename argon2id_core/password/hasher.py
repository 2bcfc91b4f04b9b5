"""
Argon2id Primitive
==================
Adapter around argon2-cffi's raw Argon2id key derivation.
"""

from typing import Union

from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

# String form stored in the `v=` segment of new tokens
VERSION = str(ARGON2_VERSION)


def to_bytes(secret: Union[str, bytes]) -> bytes:
    """
    Encode a secret as UTF-8 unless it already is bytes.

    Lone surrogates are kept (surrogatepass) so every str can be hashed.
    """
    if isinstance(secret, str):
        return secret.encode("utf-8", errors="surrogatepass")
    return bytes(secret)


def derive(
    secret: Union[str, bytes],
    salt: bytes,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    digest_length: int,
) -> bytes:
    """
    Run Argon2id over a secret.

    Deterministic for fixed inputs. Errors raised by argon2-cffi for
    parameters it rejects (argon2.exceptions.HashingError) propagate.
    """
    return hash_secret_raw(
        secret=to_bytes(secret),
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=digest_length,
        type=Type.ID,
    )
