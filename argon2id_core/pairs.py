"""
Pair-List Parsing
=================
Parses comma-separated `key=value` lists such as `m=65536,t=1,p=4`.
"""

import re
from enum import Enum
from typing import Dict, Union

from .exceptions import InvalidNumberError, InvalidPairError

UINT64_MAX = 2**64 - 1

_DIGITS = re.compile(r"[0-9]+")


class PairKind(str, Enum):
    """Value types a pair list can be parsed into."""
    STRING = "string"
    UINT64 = "uint64"


def _split_pair(pair: str):
    key, sep, value = pair.partition("=")
    if not sep:
        raise InvalidPairError(pair)
    return key, value


def _to_uint64(key: str, value: str) -> int:
    if not _DIGITS.fullmatch(value):
        raise InvalidNumberError(key, value)
    number = int(value)
    if number > UINT64_MAX:
        raise InvalidNumberError(key, value)
    return number


def parse_pairs(text: str, kind: PairKind) -> Dict[str, Union[str, int]]:
    """
    Parse a `,`-separated list of `key=value` pairs.

    Each pair is split on its first `=`, so values may contain `=` but keys
    may not. The last occurrence of a duplicate key wins.

    Args:
        text: The pair list
        kind: PairKind.STRING keeps values verbatim, PairKind.UINT64 parses
            them as base-10 unsigned 64-bit integers

    Returns:
        Mapping of keys to parsed values

    Raises:
        InvalidPairError: A pair has no `=`
        InvalidNumberError: A UINT64 value is not a valid unsigned integer
    """
    kind = PairKind(kind)
    result: Dict[str, Union[str, int]] = {}

    for pair in text.split(","):
        key, value = _split_pair(pair)
        if kind is PairKind.UINT64:
            result[key] = _to_uint64(key, value)
        else:
            result[key] = value

    return result


def parse_str_pairs(text: str) -> Dict[str, str]:
    """Parse a pair list keeping values as strings."""
    return parse_pairs(text, PairKind.STRING)


def parse_uint_pairs(text: str) -> Dict[str, int]:
    """Parse a pair list of unsigned 64-bit integer values."""
    return parse_pairs(text, PairKind.UINT64)
