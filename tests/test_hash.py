import pytest

from ckbkit.hash import Hash, bytes_to_hash, hex_to_hash
from ckbkit.hexutil import HexError

CODE_HASH = "0x9bd7e06f3ecf4be0f2fcd2188b23f1b9fcc88e5d4b65a8637b17723bbda3cce8"
ZERO = "0x0000000000000000000000000000000000000000000000000000000000000000"


def test_default_hash_is_zero():
    assert Hash().hex() == ZERO


def test_hex_to_hash_round_trip():
    h = hex_to_hash(CODE_HASH)
    assert h.hex() == CODE_HASH
    assert str(h) == CODE_HASH
    assert bytes(h) == bytes.fromhex(CODE_HASH[2:])


def test_hex_to_hash_without_prefix():
    assert hex_to_hash(CODE_HASH[2:]) == hex_to_hash(CODE_HASH)


def test_hex_to_hash_odd_length():
    assert hex_to_hash("0x1") == bytes_to_hash(b"\x01")


def test_hex_to_hash_rejects_garbage():
    with pytest.raises(HexError):
        hex_to_hash("0xzz")


def test_bytes_to_hash_left_pads():
    h = bytes_to_hash(b"\x01\x02")
    assert h.value[-2:] == b"\x01\x02"
    assert h.value[:-2] == bytes(30)


def test_bytes_to_hash_keeps_last_bytes():
    data = bytes(range(40))
    assert bytes_to_hash(data) == Hash(data[8:])


def test_hash_requires_exact_length():
    with pytest.raises(ValueError):
        Hash(b"abc")


def test_json_round_trip():
    h = hex_to_hash(CODE_HASH)
    assert Hash.from_json(h.to_json()) == h


@pytest.mark.parametrize("bad", ["0x1234", CODE_HASH[2:], None, 12, CODE_HASH + "00"])
def test_from_json_rejects(bad):
    with pytest.raises(HexError):
        Hash.from_json(bad)


def test_hashes_are_hashable_and_comparable():
    a = hex_to_hash(CODE_HASH)
    b = Hash.from_json(CODE_HASH)
    assert {a: 1}[b] == 1
    assert a != Hash()