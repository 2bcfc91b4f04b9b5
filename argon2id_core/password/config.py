"""
Hashing Configuration
=====================
Default Argon2id parameters and the optional configuration surface.
"""

import os
from dataclasses import dataclass

# Defaults used by HashRecord.new()
DEFAULT_SALT_LENGTH = 16        # bytes
DEFAULT_TIME_COST = 1           # iterations
DEFAULT_MEMORY_COST = 64 * 1024  # KiB (64MB)
DEFAULT_PARALLELISM = 4         # lanes
DEFAULT_DIGEST_LENGTH = 32      # bytes

SUPPORTED_ALGORITHM = "argon2id"

UINT32_MAX = 2**32 - 1
UINT8_MAX = 2**8 - 1

ENV_PREFIX = "ARGON2ID_"


@dataclass(frozen=True)
class HashConfig:
    """Parameters for deriving a new hash record."""
    time_cost: int = DEFAULT_TIME_COST
    memory_cost: int = DEFAULT_MEMORY_COST
    parallelism: int = DEFAULT_PARALLELISM
    salt_length: int = DEFAULT_SALT_LENGTH
    digest_length: int = DEFAULT_DIGEST_LENGTH

    def __post_init__(self):
        _check_range("time_cost", self.time_cost, 1, UINT32_MAX)
        _check_range("memory_cost", self.memory_cost, 1, UINT32_MAX)
        _check_range("parallelism", self.parallelism, 1, UINT8_MAX)
        _check_range("salt_length", self.salt_length, 1, UINT32_MAX)
        _check_range("digest_length", self.digest_length, 1, UINT32_MAX)

    @classmethod
    def from_env(cls) -> "HashConfig":
        """
        Build a config from ARGON2ID_* environment variables.

        Unset variables fall back to the defaults.
        """
        return cls(
            time_cost=int(os.getenv(f"{ENV_PREFIX}TIME_COST", str(DEFAULT_TIME_COST))),
            memory_cost=int(os.getenv(f"{ENV_PREFIX}MEMORY_COST", str(DEFAULT_MEMORY_COST))),
            parallelism=int(os.getenv(f"{ENV_PREFIX}PARALLELISM", str(DEFAULT_PARALLELISM))),
            salt_length=int(os.getenv(f"{ENV_PREFIX}SALT_LENGTH", str(DEFAULT_SALT_LENGTH))),
            digest_length=int(os.getenv(f"{ENV_PREFIX}DIGEST_LENGTH", str(DEFAULT_DIGEST_LENGTH))),
        )


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
        raise ValueError(f"{name} must be an integer between {low} and {high}, got {value!r}")


DEFAULT_CONFIG = HashConfig()
