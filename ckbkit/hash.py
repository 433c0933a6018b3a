"""The 32-byte hash type."""

from __future__ import annotations

from dataclasses import dataclass

from ckbkit.hexutil import HexError, _HEX_DIGITS, decode_bytes, encode_bytes

HASH_LENGTH = 32


@dataclass(frozen=True, repr=False)
class Hash:
    """An immutable 32-byte hash."""

    value: bytes = bytes(HASH_LENGTH)

    def __post_init__(self) -> None:
        data = bytes(self.value)
        if len(data) != HASH_LENGTH:
            raise ValueError(f"hash must be {HASH_LENGTH} bytes, got {len(data)}")
        object.__setattr__(self, "value", data)

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"Hash({self.hex()!r})"

    def hex(self) -> str:
        """Return the 0x-prefixed hex form."""
        return encode_bytes(self.value)

    def to_json(self) -> str:
        return self.hex()

    @classmethod
    def from_json(cls, value: object) -> Hash:
        """Parse a JSON string holding exactly 32 hex-encoded bytes."""
        if not isinstance(value, str):
            raise HexError("hash must be a JSON string")
        data = decode_bytes(value)
        if len(data) != HASH_LENGTH:
            raise HexError(
                f"hex string has length {len(data) * 2}, want {HASH_LENGTH * 2} for Hash"
            )
        return cls(data)


def bytes_to_hash(data: bytes) -> Hash:
    """Build a hash from bytes, keeping the last 32 and left-padding shorter input."""
    tail = bytes(data)[-HASH_LENGTH:]
    return Hash(tail.rjust(HASH_LENGTH, b"\x00"))


def hex_to_hash(text: str) -> Hash:
    """Build a hash from hex text; the prefix is optional and odd lengths are padded."""
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    if not set(digits) <= _HEX_DIGITS:
        raise HexError(f"invalid hex string: {text!r}")
    if len(digits) % 2:
        digits = "0" + digits
    return bytes_to_hash(bytes.fromhex(digits))