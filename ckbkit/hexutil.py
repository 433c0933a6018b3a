"""Hex encoding of byte strings and quantities as used on the JSON-RPC wire."""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class HexError(ValueError):
    """Raised when a hex string is malformed or out of range."""


def _digits(text: object) -> str:
    if not isinstance(text, str):
        raise HexError(f"expected a hex string, got {type(text).__name__}")
    if not text:
        raise HexError("empty hex string")
    if text[:2] not in ("0x", "0X"):
        raise HexError(f"hex string without 0x prefix: {text!r}")
    digits = text[2:]
    if not set(digits) <= _HEX_DIGITS:
        raise HexError(f"invalid hex string: {text!r}")
    return digits


def encode_bytes(data: bytes) -> str:
    """Encode bytes as a 0x-prefixed lower-case hex string."""
    return "0x" + bytes(data).hex()


def decode_bytes(text: str) -> bytes:
    """Decode a 0x-prefixed hex string of even length."""
    digits = _digits(text)
    if len(digits) % 2:
        raise HexError(f"hex string of odd length: {text!r}")
    return bytes.fromhex(digits)


def encode_quantity(value: int) -> str:
    """Encode a non-negative integer as a 0x-prefixed hex number without leading zeros."""
    if value < 0:
        raise HexError(f"cannot encode negative quantity {value}")
    return hex(value)


def decode_quantity(text: str, bits: int = 64) -> int:
    """Decode a 0x-prefixed hex number that must fit in ``bits`` bits."""
    digits = _digits(text)
    if not digits:
        raise HexError('hex string "0x"')
    if len(digits) > 1 and digits[0] == "0":
        raise HexError(f"hex number with leading zero digits: {text!r}")
    value = int(digits, 16)
    if value.bit_length() > bits:
        raise HexError(f"hex number > {bits} bits: {text!r}")
    return value