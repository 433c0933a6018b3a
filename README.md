# ckbkit

Small building blocks for working with CKB data in Python. The package has no
runtime dependencies.

## Modules

- `ckbkit.hexutil` – `0x`-prefixed hex as used on the JSON-RPC wire:
  `encode_bytes`, `decode_bytes`, `encode_quantity` and
  `decode_quantity(text, bits=64)`. Malformed input (missing prefix, odd
  length, leading zero digits in a quantity, a value wider than `bits`) raises
  `HexError`, a subclass of `ValueError`.
- `ckbkit.hash` – the immutable 32-byte `Hash` with `hex()`, `to_json()` and
  `Hash.from_json()`, plus `bytes_to_hash` (keeps the last 32 bytes and
  left-pads shorter input) and `hex_to_hash` (prefix optional).
- `ckbkit.epoch` – `parse_epoch` splits a packed 64-bit epoch value into an
  `EpochParams` of `length`, `index` and `number`; `EpochParams.to_int()` packs
  it back.
- `ckbkit.molecule` – the Molecule binary layout: `pack_fixvec` /
  `unpack_fixvec` for byte vectors, `pack_option`, `pack_table` /
  `unpack_table` and `pack_dynvec` / `unpack_dynvec`. Malformed data raises
  `MoleculeError`.
- `ckbkit.omnilock` – Omnilock script arguments: `AuthFlag`,
  `Authentication` (flag plus 20 bytes), `OmniConfig` (flag bits for admin,
  anyone-can-pay, time-lock and supply modes and their sections) and
  `OmnilockArgs` with `encode()` and `OmnilockArgs.from_args()`.
- `ckbkit.omnilock_molecule` – checked parsing of the Molecule structures in an
  Omnilock witness: `parse_bytes_opt`, `parse_auth`, `parse_smt_proof_entry`,
  `parse_identity`, `parse_identity_opt` and `parse_witness_lock`.
- `ckbkit.omnilock_witness` – the Omnilock witness lock: `OmnilockFlag`,
  `Auth`, `SmtProofEntry`, `OmnilockIdentity` and `OmnilockWitnessLock` with
  `serialize()`, `serialize_as_placeholder()` (zero bytes of the same length)
  and `OmnilockWitnessLock.deserialize()`.

## Install

```
pip install .
```

## Examples

Hex and hashes:

```python
from ckbkit.hexutil import decode_quantity, encode_bytes
from ckbkit.hash import hex_to_hash

print(decode_quantity("0x2a"))          # 42
print(encode_bytes(b"\x01\x02"))        # 0x0102
h = hex_to_hash("0x9bd7e06f3ecf4be0f2fcd2188b23f1b9fcc88e5d4b65a8637b17723bbda3cce8")
print(h.to_json())
```

Splitting a packed epoch value:

```python
from ckbkit.epoch import parse_epoch

params = parse_epoch(0x7080018000001)
print(params.length, params.index, params.number)   # 1800 24 1
```

Omnilock arguments:

```python
from ckbkit.omnilock import AuthFlag, OmnilockArgs

args = OmnilockArgs.from_args(bytes([0x00]) + bytes(20) + bytes([0x00]))
print(args.authentication.flag is AuthFlag.CKB_SECP256K1_BLAKE160)
print(args.encode().hex())
```

An Omnilock witness lock with a 65-byte signature slot:

```python
from ckbkit.omnilock_witness import OmnilockWitnessLock

lock = OmnilockWitnessLock(signature=bytes(65))
data = lock.serialize()
assert OmnilockWitnessLock.deserialize(data) == lock
placeholder = lock.serialize_as_placeholder()
assert len(placeholder) == len(data)
```

## What the package does not do

- It has no transaction, block, cell or script types and no JSON codecs for
  them; only `Hash` has `to_json` / `from_json`.
- It does not compute hashes of data or transaction fees, and does not talk to
  a node.
- It does not sign anything: there are no keys, no signature computation and no
  signer registry. Omnilock witness locks can be built, serialized and parsed,
  but the signature bytes must come from elsewhere.
- It has no command-line interface.

## Tests

```
pip install ".[test]"
pytest
```