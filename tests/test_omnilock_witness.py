import pytest

from ckbkit.hexutil import decode_bytes
from ckbkit.molecule import MoleculeError, unpack_fixvec, unpack_table
from ckbkit.omnilock_witness import (
    Auth,
    OmnilockFlag,
    OmnilockIdentity,
    OmnilockWitnessLock,
    SmtProofEntry,
)

WITNESS = decode_bytes(
    "0x690000001000000069000000690000005500000055000000100000005500000055000000"
    "410000003434ca813dc378de0146aac8e60431fb52114acb3cb639f2fb2a479e1f21922353"
    "2540413a154f440e939ee888c29221c0e8d6fef39402cbeedb6155317b356200"
)
EXPECTED_LOCK = decode_bytes(
    "0x55000000100000005500000055000000410000003434ca813dc378de0146aac8e60431fb"
    "52114acb3cb639f2fb2a479e1f219223532540413a154f440e939ee888c29221c0e8d6fef3"
    "9402cbeedb6155317b356200"
)


def _witness_lock(witness: bytes) -> bytes:
    lock_field, _, _ = unpack_table(witness, 3, "WitnessArgs")
    return unpack_fixvec(lock_field)


def test_witness_lock_serialize_matches_source_case():
    lock = OmnilockWitnessLock.deserialize(_witness_lock(WITNESS))
    assert lock.serialize() == EXPECTED_LOCK
    assert lock.signature == EXPECTED_LOCK[20:]
    assert lock.omnilock_identity is None
    assert lock.preimage is None


def test_empty_witness_lock_is_molecule_default():
    assert OmnilockWitnessLock().serialize() == bytes(
        [16, 0, 0, 0, 16, 0, 0, 0, 16, 0, 0, 0, 16, 0, 0, 0]
    )


def test_smt_proof_entry_default_pack():
    assert SmtProofEntry().pack() == bytes(
        [17, 0, 0, 0, 12, 0, 0, 0, 13, 0, 0, 0, 0, 0, 0, 0, 0]
    )


def test_identity_default_pack():
    expected = bytes([37, 0, 0, 0, 12, 0, 0, 0, 33, 0, 0, 0]) + bytes(21) + bytes([4, 0, 0, 0])
    assert OmnilockIdentity().pack() == expected


def test_auth_encode():
    auth = Auth(flag=OmnilockFlag.LOCK_SCRIPT_HASH, auth_content=bytes(range(20)))
    assert auth.encode() == b"\xfc" + bytes(range(20))


def test_auth_keeps_unknown_flag_as_int():
    auth = Auth(flag=0x07, auth_content=b"\x01")
    assert auth.flag == 7
    assert auth.encode() == b"\x07\x01"


def test_identity_pack_rejects_wrong_auth_size():
    identity = OmnilockIdentity(identity=Auth(auth_content=b"\x01\x02"))
    with pytest.raises(ValueError):
        identity.pack()


def test_round_trip_with_identity_and_preimage():
    lock = OmnilockWitnessLock(
        signature=bytes([7]) * 65,
        omnilock_identity=OmnilockIdentity(
            identity=Auth(flag=OmnilockFlag.LOCK_SCRIPT_HASH, auth_content=bytes([9]) * 20),
            proofs=[
                SmtProofEntry(mask=3, smt_proof=b"\x4c\x4f\x00"),
                SmtProofEntry(mask=1, smt_proof=b""),
            ],
        ),
        preimage=b"preimage",
    )
    decoded = OmnilockWitnessLock.deserialize(lock.serialize())
    assert decoded == lock
    assert decoded.omnilock_identity.identity.flag is OmnilockFlag.LOCK_SCRIPT_HASH


def test_placeholder_is_zeroes_of_same_length():
    lock = OmnilockWitnessLock(signature=bytes([1]) * 65)
    placeholder = lock.serialize_as_placeholder()
    assert len(placeholder) == len(lock.serialize())
    assert placeholder == bytes(len(placeholder))


def test_deserialize_rejects_bad_total_size():
    data = bytearray(EXPECTED_LOCK)
    data[0] = 0x54
    with pytest.raises(MoleculeError):
        OmnilockWitnessLock.deserialize(bytes(data))


def test_deserialize_rejects_truncated_header():
    with pytest.raises(MoleculeError):
        OmnilockWitnessLock.deserialize(b"\x01\x00")