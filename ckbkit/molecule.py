"""Molecule encoding primitives: byte vectors, options, tables and dynamic vectors."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

HEADER_SIZE = 4


class MoleculeError(ValueError):
    """Raised when molecule-encoded data is malformed."""


def _error(*parts: object) -> MoleculeError:
    return MoleculeError(" ".join(str(part) for part in parts))


def _pack_number(value: int) -> bytes:
    return value.to_bytes(HEADER_SIZE, "little")


def _number(data: bytes, at: int = 0) -> int:
    return int.from_bytes(data[at : at + HEADER_SIZE], "little")


def pack_fixvec(data: bytes) -> bytes:
    """Pack a vector of single bytes: a 4-byte little-endian count, then the bytes."""
    data = bytes(data)
    return _pack_number(len(data)) + data


def unpack_fixvec(data: bytes, name: str = "Bytes") -> bytes:
    """Check a byte vector and return the bytes it holds."""
    data = bytes(data)
    size = len(data)
    if size < HEADER_SIZE:
        raise _error("HeaderIsBroken", name, size, "<", HEADER_SIZE)
    expected = HEADER_SIZE + _number(data)
    if size != expected:
        raise _error("TotalSizeNotMatch", name, size, "!=", expected)
    return data[HEADER_SIZE:]


def pack_option(data: bytes | None) -> bytes:
    """Pack an option: nothing for None, the packed value itself otherwise."""
    return b"" if data is None else bytes(data)


def _pack_offsets(parts: Sequence[bytes]) -> bytes:
    header_size = HEADER_SIZE * (len(parts) + 1)
    offsets = []
    position = header_size
    for part in parts:
        offsets.append(position)
        position += len(part)
    header = _pack_number(position) + b"".join(_pack_number(o) for o in offsets)
    return header + b"".join(parts)


def pack_table(fields: Iterable[bytes]) -> bytes:
    """Pack already-serialized fields as a table: total size, offsets, then fields."""
    return _pack_offsets([bytes(f) for f in fields])


def pack_dynvec(items: Iterable[bytes]) -> bytes:
    """Pack already-serialized items as a dynamic vector."""
    parts = [bytes(item) for item in items]
    if not parts:
        return _pack_number(HEADER_SIZE)
    return _pack_offsets(parts)


def _checked_total(data: bytes, name: str) -> int:
    size = len(data)
    if size < HEADER_SIZE:
        raise _error("HeaderIsBroken", name, size, "<", HEADER_SIZE)
    total = _number(data)
    if total != size:
        raise _error("TotalSizeNotMatch", name, size, "!=", total)
    return total


def _read_offsets(data: bytes, name: str) -> list[int]:
    size = len(data)
    if size < HEADER_SIZE * 2:
        raise _error("TotalSizeNotMatch", name, size, "<", HEADER_SIZE * 2)
    first = _number(data, HEADER_SIZE)
    if first % HEADER_SIZE != 0 or first < HEADER_SIZE * 2:
        raise _error(
            "OffsetsNotMatch", name, first % HEADER_SIZE, "!= 0", first, "<", HEADER_SIZE * 2
        )
    if size < first:
        raise _error("HeaderIsBroken", name, size, "<", first)
    count = first // HEADER_SIZE - 1
    return [_number(data, HEADER_SIZE * (i + 1)) for i in range(count)]


def _slices(data: bytes, offsets: list[int], total: int, name: str) -> list[bytes]:
    bounds = [*offsets, total]
    if any(start > end for start, end in zip(bounds, bounds[1:])):
        raise _error("OffsetsNotMatch", name)
    return [data[start:end] for start, end in zip(bounds, bounds[1:])]


def unpack_table(
    data: bytes, field_count: int, name: str = "Table", compatible: bool = False
) -> list[bytes]:
    """Check a table of ``field_count`` fields and return the raw bytes of each field.

    With ``compatible`` set, extra trailing fields are allowed and ignored.
    """
    data = bytes(data)
    total = _checked_total(data, name)
    if total == HEADER_SIZE and field_count == 0:
        return []
    offsets = _read_offsets(data, name)
    if len(offsets) < field_count or (not compatible and len(offsets) > field_count):
        raise _error("FieldCountNotMatch", name)
    return _slices(data, offsets, total, name)[:field_count]


def unpack_dynvec(data: bytes, name: str = "DynVec") -> list[bytes]:
    """Check a dynamic vector and return the raw bytes of each item."""
    data = bytes(data)
    total = _checked_total(data, name)
    if total == HEADER_SIZE:
        return []
    offsets = _read_offsets(data, name)
    return _slices(data, offsets, total, name)