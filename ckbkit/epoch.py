"""Packing and unpacking of the epoch number-with-fraction field."""

from __future__ import annotations

from dataclasses import dataclass

_UINT64_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class EpochParams:
    """Epoch length, index within the epoch and epoch number."""

    length: int
    index: int
    number: int

    def to_int(self) -> int:
        """Pack the parameters back into a 64-bit epoch value."""
        packed = (32 << 56) + (self.length << 40) + (self.index << 24) + self.number
        return packed & _UINT64_MASK


def parse_epoch(epoch: int) -> EpochParams:
    """Unpack a 64-bit epoch value."""
    return EpochParams(
        length=(epoch >> 40) & 0xFFFF,
        index=(epoch >> 24) & 0xFFFF,
        number=epoch & 0xFFFFFF,
    )