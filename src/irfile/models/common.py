"""Common types and validators for Pydantic models."""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator

UINT32_MAX = 0xFFFFFFFF

# One byte written in hex: digits only, no sign or 0x prefix
HEX_BYTE_PATTERN = re.compile(r"[0-9A-Fa-f]+")

# Unicode white space minus the ASCII separators \x1c-\x1f, which are
# field content in signal files but count as white space for str.isspace()
WHITESPACE = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE)}]+")


def strip_space(text: str) -> str:
    """Strip leading and trailing WHITESPACE."""
    return text.strip(WHITESPACE)


def split_fields(text: str) -> list[str]:
    """Split on runs of WHITESPACE, dropping empty tokens."""
    return [token for token in _WHITESPACE_RUN.split(text) if token]


def decode_le_hex32(text: str) -> int:
    """Decode four whitespace-separated hex bytes into an unsigned 32-bit integer.

    The first token is the least-significant byte.

    Args:
    ----
        text: Byte tokens as written in the file (e.g., "15 00 00 00")

    Returns:
    -------
        Decoded integer value

    Raises:
    ------
        ValueError: If there are not exactly 4 tokens or a token is not a hex byte

    Examples:
    --------
        >>> decode_le_hex32("15 00 00 00")
        21
        >>> decode_le_hex32("EF be AD de")
        3735928559

    """
    tokens = split_fields(text)
    if len(tokens) != 4:
        raise ValueError(f"expected 4 bytes, got {len(tokens)}")

    result = 0
    for i, token in enumerate(tokens):
        if not HEX_BYTE_PATTERN.fullmatch(token):
            raise ValueError(f"invalid hex byte {token!r}")
        byte = int(token, 16)
        if byte > 0xFF:
            raise ValueError(f"hex byte {token!r} out of range (00-FF)")
        result |= byte << (8 * i)

    return result


def encode_le_hex32(value: int) -> str:
    """Encode an unsigned 32-bit integer as four hex bytes, least-significant first.

    Args:
    ----
        value: Integer value to encode

    Returns:
    -------
        Upper-case, zero-padded byte tokens (e.g., "15 00 00 00")

    """
    validate_uint32(value)
    return " ".join(f"{(value >> (8 * i)) & 0xFF:02X}" for i in range(4))


def validate_uint32(value: int) -> int:
    """Validate that value fits in uint32 range."""
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"Value {value} out of uint32 range (0-4294967295)")
    return value


def validate_non_empty(value: str) -> str:
    """Validate that a string is not empty."""
    if not value:
        raise ValueError("must not be empty")
    return value


def enum_to_value(value: Any) -> Any:
    """Unwrap an enum member to its plain value; pass anything else through."""
    if isinstance(value, Enum):
        return value.value
    return value


# Address/command fields: always representable in exactly 4 bytes
UInt32 = Annotated[int, AfterValidator(validate_uint32)]

# Signal names: an empty name marks "no record" in the file format
NonEmptyStr = Annotated[str, AfterValidator(validate_non_empty)]

# Free-form text that also accepts a member of one of the conventional-value enums
PlainStr = Annotated[str, BeforeValidator(enum_to_value)]
