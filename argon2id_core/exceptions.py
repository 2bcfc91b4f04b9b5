"""
Argon2id Core Exceptions
========================
Exception classes for hashing, token parsing and verification.
"""

from typing import Optional


class Argon2idError(Exception):
    """Base exception for all argon2id-core errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RandomSourceError(Argon2idError):
    """Raised when the operating system entropy source fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class TokenError(Argon2idError, ValueError):
    """Base exception for tokens that cannot be turned into a hash record."""
    pass


class MalformedTokenError(TokenError):
    """Raised when a token does not have exactly five `$`-separated segments."""
    pass


class UnsupportedAlgorithmError(TokenError):
    """Raised when the algorithm segment is anything but argon2id."""

    def __init__(self, algorithm: str):
        super().__init__(f"only the argon2id algorithm is supported, got {algorithm!r}")
        self.algorithm = algorithm


class MissingKeyError(TokenError):
    """Raised when a required key is absent from a pair list."""

    key = ""
    description = ""

    def __init__(self):
        super().__init__(f"couldn't find the {self.description} key ({self.key})")


class MissingVersionError(MissingKeyError):
    """Raised when the version segment has no v key."""
    key = "v"
    description = "version"


class MissingMemoryError(MissingKeyError):
    """Raised when the parameter segment has no m key."""
    key = "m"
    description = "memory"


class MissingIterationsError(MissingKeyError):
    """Raised when the parameter segment has no t key."""
    key = "t"
    description = "iterations"


class MissingParallelismError(MissingKeyError):
    """Raised when the parameter segment has no p key."""
    key = "p"
    description = "parallelism"


class InvalidPairError(TokenError):
    """Raised when a pair is not in key=value format."""

    def __init__(self, pair: str):
        super().__init__(f"pair is not in key=value format: {pair!r}")
        self.pair = pair


class InvalidNumberError(TokenError):
    """Raised when a pair value is not a base-10 unsigned 64-bit integer."""

    def __init__(self, key: str, value: str):
        super().__init__(f"value of {key!r} is not an unsigned 64-bit integer: {value!r}")
        self.key = key
        self.value = value


class InvalidParameterError(TokenError):
    """Raised when a parsed cost parameter does not fit its field."""

    def __init__(self, name: str, value: int, low: int, high: int):
        super().__init__(f"{name} must be between {low} and {high}, got {value}")
        self.name = name
        self.value = value


class EncodingError(TokenError):
    """Raised when the salt or digest segment is not valid unpadded base64."""

    def __init__(self, segment: str, reason: str):
        super().__init__(f"invalid {segment} encoding: {reason}")
        self.segment = segment
