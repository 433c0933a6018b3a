"""Checked parsing of the molecule structures used in omnilock witnesses."""

from __future__ import annotations

from ckbkit.molecule import MoleculeError, unpack_dynvec, unpack_fixvec, unpack_table

AUTH_SIZE = 21

SmtProofEntryParts = tuple[int, bytes]
IdentityParts = tuple[bytes, list[SmtProofEntryParts]]
WitnessLockParts = tuple["bytes | None", "IdentityParts | None", "bytes | None"]


def parse_bytes_opt(data: bytes, compatible: bool = False) -> bytes | None:
    """Parse an optional byte vector; empty input means absent.

    ``compatible`` has no effect: byte vectors have no extensible fields.
    """
    data = bytes(data)
    if not data:
        return None
    return unpack_fixvec(data, "Bytes")


def parse_auth(data: bytes) -> bytes:
    """Check a fixed 21-byte auth array and return it."""
    data = bytes(data)
    if len(data) != AUTH_SIZE:
        raise MoleculeError(f"TotalSizeNotMatch Auth {len(data)} != {AUTH_SIZE}")
    return data


def parse_smt_proof_entry(data: bytes, compatible: bool = False) -> SmtProofEntryParts:
    """Parse an SMT proof entry table into its mask byte and proof bytes."""
    mask, proof = unpack_table(data, 2, "SmtProofEntry", compatible)
    if len(mask) != 1:
        raise MoleculeError("TotalSizeNotMatch")
    return mask[0], unpack_fixvec(proof, "SmtProof")


def parse_identity(data: bytes, compatible: bool = False) -> IdentityParts:
    """Parse an identity table into its auth bytes and its list of proof entries."""
    auth, proofs = unpack_table(data, 2, "Identity", compatible)
    entries = [
        parse_smt_proof_entry(item, compatible)
        for item in unpack_dynvec(proofs, "SmtProofEntryVec")
    ]
    return parse_auth(auth), entries


def parse_identity_opt(data: bytes, compatible: bool = False) -> IdentityParts | None:
    """Parse an optional identity; empty input means absent."""
    data = bytes(data)
    if not data:
        return None
    return parse_identity(data, compatible)


def parse_witness_lock(data: bytes, compatible: bool = False) -> WitnessLockParts:
    """Parse an omnilock witness lock into signature, identity and preimage."""
    signature, identity, preimage = unpack_table(
        data, 3, "OmniLockWitnessLock", compatible
    )
    return (
        parse_bytes_opt(signature, compatible),
        parse_identity_opt(identity, compatible),
        parse_bytes_opt(preimage, compatible),
    )