"""Omnilock witness lock: signature, optional identity with SMT proofs, preimage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from ckbkit.molecule import pack_dynvec, pack_fixvec, pack_option, pack_table
from ckbkit.omnilock_molecule import AUTH_SIZE, parse_witness_lock


class OmnilockFlag(IntEnum):
    CKB_SECP256K1_BLAKE160 = 0x00
    LOCK_SCRIPT_HASH = 0xFC


def _omnilock_flag(value: int) -> OmnilockFlag | int:
    try:
        return OmnilockFlag(value)
    except ValueError:
        return value


@dataclass
class Auth:
    """An identity: a one-byte flag followed by its content."""

    flag: OmnilockFlag | int = OmnilockFlag.CKB_SECP256K1_BLAKE160
    auth_content: bytes = b""

    def __post_init__(self) -> None:
        if not 0 <= int(self.flag) <= 0xFF:
            raise ValueError(f"omnilock flag out of byte range: {self.flag}")
        self.flag = _omnilock_flag(int(self.flag))
        self.auth_content = bytes(self.auth_content)

    def encode(self) -> bytes:
        return bytes([int(self.flag)]) + self.auth_content


@dataclass
class SmtProofEntry:
    mask: int = 0
    smt_proof: bytes = b""

    def pack(self) -> bytes:
        """Serialize as a molecule table of the mask byte and the proof bytes."""
        if not 0 <= self.mask <= 0xFF:
            raise ValueError(f"mask out of byte range: {self.mask}")
        return pack_table([bytes([self.mask]), pack_fixvec(self.smt_proof)])


@dataclass
class OmnilockIdentity:
    identity: Auth | None = None
    proofs: list[SmtProofEntry] = field(default_factory=list)

    def pack(self) -> bytes:
        """Serialize as a molecule table of the 21-byte auth and the proof vector."""
        auth = bytes(AUTH_SIZE) if self.identity is None else self.identity.encode()
        if len(auth) != AUTH_SIZE:
            raise ValueError(f"identity must encode to {AUTH_SIZE} bytes, got {len(auth)}")
        return pack_table([auth, pack_dynvec(proof.pack() for proof in self.proofs)])


@dataclass
class OmnilockWitnessLock:
    signature: bytes | None = None
    omnilock_identity: OmnilockIdentity | None = None
    preimage: bytes | None = None

    def serialize(self) -> bytes:
        return pack_table(
            [
                pack_option(None if self.signature is None else pack_fixvec(self.signature)),
                pack_option(
                    None if self.omnilock_identity is None else self.omnilock_identity.pack()
                ),
                pack_option(None if self.preimage is None else pack_fixvec(self.preimage)),
            ]
        )

    def serialize_as_placeholder(self) -> bytes:
        """Zero bytes of the same length as the serialized form."""
        return bytes(len(self.serialize()))

    @classmethod
    def deserialize(cls, data: bytes) -> OmnilockWitnessLock:
        """Parse a serialized witness lock; raises MoleculeError when malformed."""
        signature, identity, preimage = parse_witness_lock(data, False)
        omnilock_identity = None
        if identity is not None:
            auth, entries = identity
            omnilock_identity = OmnilockIdentity(
                identity=Auth(flag=auth[0], auth_content=auth[1:]),
                proofs=[SmtProofEntry(mask=mask, smt_proof=proof) for mask, proof in entries],
            )
        return cls(
            signature=signature,
            omnilock_identity=omnilock_identity,
            preimage=preimage,
        )