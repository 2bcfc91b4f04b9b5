"""
Hash Record
===========
Argon2id hash value object and its `$argon2id$...` text token.

Token format:
    $argon2id$v=19$m=65536,t=1,p=4$<salt>$<digest>

Salt and digest use the standard base64 alphabet without padding.
"""

import base64
import binascii
import hmac
import json
import re
from dataclasses import dataclass
from typing import Optional, Union

import structlog
from argon2.exceptions import HashingError

from ..exceptions import (
    EncodingError,
    InvalidParameterError,
    MalformedTokenError,
    MissingIterationsError,
    MissingMemoryError,
    MissingParallelismError,
    MissingVersionError,
    UnsupportedAlgorithmError,
)
from ..pairs import parse_str_pairs, parse_uint_pairs
from .config import DEFAULT_CONFIG, SUPPORTED_ALGORITHM, UINT32_MAX, UINT8_MAX, HashConfig
from .hasher import VERSION, derive
from .salt import generate_salt

logger = structlog.get_logger(__name__)

TOKEN_SEPARATOR = "$"
SEGMENT_COUNT = 5

_B64_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")


def b64encode(data: bytes) -> str:
    """Standard base64 without `=` padding."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(text: str, segment: str) -> bytes:
    """Decode unpadded standard base64, raising EncodingError on bad input."""
    if not text:
        raise EncodingError(segment, "empty")
    if not _B64_ALPHABET.fullmatch(text):
        raise EncodingError(segment, "illegal character")
    if len(text) % 4 == 1:
        raise EncodingError(segment, "truncated input")
    try:
        return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except binascii.Error as exc:
        raise EncodingError(segment, str(exc)) from exc


@dataclass(frozen=True)
class HashRecord:
    """An Argon2id digest together with the salt and parameters that produced it."""
    digest: bytes
    salt: bytes
    memory_cost: int
    time_cost: int
    parallelism: int
    version: str
    algorithm: str = SUPPORTED_ALGORITHM

    def __post_init__(self):
        if self.algorithm != SUPPORTED_ALGORITHM:
            raise ValueError(f"algorithm must be {SUPPORTED_ALGORITHM!r}, got {self.algorithm!r}")
        if not self.digest or not self.salt:
            raise ValueError("digest and salt must not be empty")
        if self.parallelism < 1:
            raise ValueError("parallelism must be at least 1")

    @classmethod
    def new(cls, secret: Union[str, bytes], config: Optional[HashConfig] = None) -> "HashRecord":
        """
        Hash a secret with a fresh random salt.

        Args:
            secret: Password or other secret to hash
            config: Parameters to hash with (defaults: t=1, m=65536, p=4,
                16-byte salt, 32-byte digest)

        Returns:
            The populated hash record

        Raises:
            RandomSourceError: The entropy source failed
        """
        config = config or DEFAULT_CONFIG
        salt = generate_salt(config.salt_length)

        digest = derive(
            secret,
            salt,
            time_cost=config.time_cost,
            memory_cost=config.memory_cost,
            parallelism=config.parallelism,
            digest_length=config.digest_length,
        )

        logger.debug(
            "Argon2id hash created",
            time_cost=config.time_cost,
            memory_cost=config.memory_cost,
            parallelism=config.parallelism,
        )

        return cls(
            digest=digest,
            salt=salt,
            memory_cost=config.memory_cost,
            time_cost=config.time_cost,
            parallelism=config.parallelism,
            version=VERSION,
            algorithm=SUPPORTED_ALGORITHM,
        )

    def serialize(self) -> str:
        """Encode the record as a `$argon2id$v=..$m=..,t=..,p=..$salt$digest` token."""
        return (
            f"${self.algorithm}"
            f"$v={self.version}"
            f"$m={self.memory_cost},t={self.time_cost},p={self.parallelism}"
            f"${b64encode(self.salt)}"
            f"${b64encode(self.digest)}"
        )

    @classmethod
    def deserialize(cls, token: str) -> "HashRecord":
        """
        Parse a token produced by serialize() (or any PHC-style argon2id hash).

        A single leading `$` is optional. Missing parameter keys are checked
        in the order m, t, p and only the first one is reported.

        Raises:
            MalformedTokenError: Not exactly five segments
            UnsupportedAlgorithmError: Algorithm is not argon2id
            MissingVersionError: No `v` key
            MissingMemoryError, MissingIterationsError, MissingParallelismError:
                No `m`, `t` or `p` key
            InvalidPairError, InvalidNumberError: Bad pair list
            InvalidParameterError: A cost parameter does not fit its field
            EncodingError: Salt or digest is not valid base64
        """
        if token.startswith(TOKEN_SEPARATOR):
            token = token[len(TOKEN_SEPARATOR):]

        segments = token.split(TOKEN_SEPARATOR)
        if len(segments) != SEGMENT_COUNT:
            raise MalformedTokenError(
                f"hash format not understood: expected {SEGMENT_COUNT} segments, got {len(segments)}"
            )

        algorithm, version_part, params_part, salt_part, digest_part = segments

        if algorithm != SUPPORTED_ALGORITHM:
            raise UnsupportedAlgorithmError(algorithm)

        versions = parse_str_pairs(version_part)
        if "v" not in versions:
            raise MissingVersionError()

        params = parse_uint_pairs(params_part)
        if "m" not in params:
            raise MissingMemoryError()
        if "t" not in params:
            raise MissingIterationsError()
        if "p" not in params:
            raise MissingParallelismError()

        memory_cost = _in_range("memory_cost", params["m"], 0, UINT32_MAX)
        time_cost = _in_range("time_cost", params["t"], 0, UINT32_MAX)
        parallelism = _in_range("parallelism", params["p"], 1, UINT8_MAX)

        salt = b64decode(salt_part, "salt")
        digest = b64decode(digest_part, "digest")

        return cls(
            digest=digest,
            salt=salt,
            memory_cost=memory_cost,
            time_cost=time_cost,
            parallelism=parallelism,
            version=versions["v"],
            algorithm=algorithm,
        )

    def compare(self, candidate: Union[str, bytes]) -> bool:
        """
        Check a candidate secret against the stored digest.

        The digest is recomputed with the stored salt and parameters and
        compared with hmac.compare_digest. Parameters argon2 refuses to
        hash with (salt under 8 bytes, digest under 4 bytes, too little
        memory) never match.
        """
        try:
            computed = derive(
                candidate,
                self.salt,
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                digest_length=len(self.digest),
            )
        except HashingError:
            return False
        return hmac.compare_digest(computed, self.digest)

    def to_json(self) -> str:
        """Serialize as a JSON string literal holding the token."""
        return json.dumps(self.serialize())

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "HashRecord":
        """Parse a JSON string literal holding a token."""
        try:
            value = json.loads(text)
        except ValueError as exc:
            raise MalformedTokenError(f"invalid JSON: {exc}") from exc
        if not isinstance(value, str):
            raise MalformedTokenError(f"expected a JSON string, got {type(value).__name__}")
        return cls.deserialize(value)


def _in_range(name: str, value: int, low: int, high: int) -> int:
    if not low <= value <= high:
        raise InvalidParameterError(name, value, low, high)
    return value


def new(secret: Union[str, bytes], config: Optional[HashConfig] = None) -> HashRecord:
    """Hash a secret. See HashRecord.new()."""
    return HashRecord.new(secret, config=config)


def parse(token: str) -> HashRecord:
    """Convenience wrapper around HashRecord.deserialize()."""
    return HashRecord.deserialize(token)
