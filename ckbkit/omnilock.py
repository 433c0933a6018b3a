"""Omnilock script arguments: authentication and omni configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

AUTH_CONTENT_LENGTH = 20
_HASH_LENGTH = 32


class AuthFlag(IntEnum):
    CKB_SECP256K1_BLAKE160 = 0x0
    ETHEREUM = 0x1
    EOS = 0x2
    TRON = 0x3
    BITCOIN = 0x4
    DOGECOIN = 0x5
    CKB_MULTISIG = 0x6
    LOCK_SCRIPT_HASH = 0xFC
    EXEC = 0xFD
    DYNAMIC_LINKING = 0xFE


def _auth_flag(value: int) -> AuthFlag | int:
    try:
        return AuthFlag(value)
    except ValueError:
        return value


def _check_length(name: str, data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(data)}")
    return data


@dataclass
class Authentication:
    """The 21-byte auth part of omnilock args: a flag and 20 bytes of content."""

    flag: AuthFlag | int = AuthFlag.CKB_SECP256K1_BLAKE160
    auth_content: bytes = bytes(AUTH_CONTENT_LENGTH)

    def __post_init__(self) -> None:
        if not 0 <= int(self.flag) <= 0xFF:
            raise ValueError(f"auth flag out of byte range: {self.flag}")
        self.flag = _auth_flag(int(self.flag))
        self.auth_content = _check_length(
            "auth content", self.auth_content, AUTH_CONTENT_LENGTH
        )

    def encode(self) -> bytes:
        return bytes([int(self.flag)]) + self.auth_content

    @classmethod
    def decode(cls, data: bytes) -> Authentication:
        data = bytes(data)
        if len(data) < 1 + AUTH_CONTENT_LENGTH:
            raise ValueError("byte array at least should be 21 bytes")
        return cls(flag=data[0], auth_content=data[1 : 1 + AUTH_CONTENT_LENGTH])


@dataclass
class OmniConfig:
    """The omni configuration that follows the auth part of omnilock args."""

    flag: int = 0
    admin_list_cell_type_id: bytes = bytes(_HASH_LENGTH)
    minimum_ckb_exponent_in_acp: int = 0
    minimum_sudt_exponent_in_acp: int = 0
    since_for_time_lock: int = 0
    type_script_hash_for_supply: bytes = bytes(_HASH_LENGTH)

    def __post_init__(self) -> None:
        self.admin_list_cell_type_id = _check_length(
            "admin list cell type id", self.admin_list_cell_type_id, _HASH_LENGTH
        )
        self.type_script_hash_for_supply = _check_length(
            "type script hash for supply", self.type_script_hash_for_supply, _HASH_LENGTH
        )

    def is_admin_mode_enabled(self) -> bool:
        return bool(self.flag & 0b1)

    def is_anyone_can_pay_mode_enabled(self) -> bool:
        return bool(self.flag & 0b10)

    def is_time_lock_mode_enabled(self) -> bool:
        return bool(self.flag & 0b100)

    def is_supply_mode_enabled(self) -> bool:
        return bool(self.flag & 0b1000)

    def encode(self) -> bytes:
        """Encode the flag and each enabled section, stopping at the first disabled one."""
        out = bytearray([self.flag])
        if not self.is_admin_mode_enabled():
            return bytes(out)
        out += self.admin_list_cell_type_id
        if not self.is_anyone_can_pay_mode_enabled():
            return bytes(out)
        out.append(self.minimum_ckb_exponent_in_acp)
        out.append(self.minimum_sudt_exponent_in_acp)
        if not self.is_time_lock_mode_enabled():
            return bytes(out)
        out.append(self.since_for_time_lock & 0xFF)
        if self.is_supply_mode_enabled():
            out += self.type_script_hash_for_supply
        return bytes(out)

    @classmethod
    def decode(cls, data: bytes) -> OmniConfig:
        data = bytes(data)
        if not data:
            raise ValueError("byte array should not be empty")
        config = cls(flag=data[0])
        if config.is_admin_mode_enabled():
            if len(data) < 33:
                raise ValueError(
                    "byte array at least should be 33 bytes when admin mode is enabled"
                )
            config.admin_list_cell_type_id = data[1:33]
        if config.is_anyone_can_pay_mode_enabled():
            if len(data) < 34:
                raise ValueError(
                    "byte array at least should be 34 bytes when ACP mode is enabled"
                )
            config.minimum_ckb_exponent_in_acp = data[33]
            # The sUDT exponent may be absent.
            if len(data) >= 35:
                config.minimum_sudt_exponent_in_acp = data[34]
        if config.is_time_lock_mode_enabled():
            if len(data) < 43:
                raise ValueError(
                    "byte array at least should be 43 bytes when time-lock mode is enabled"
                )
            config.since_for_time_lock = data[35]
        if config.is_supply_mode_enabled():
            if len(data) < 75:
                raise ValueError(
                    "byte array at least should be 75 bytes when supply mode is enabled"
                )
            config.type_script_hash_for_supply = data[43:75]
        return config


@dataclass
class OmnilockArgs:
    authentication: Authentication = field(default_factory=Authentication)
    omni_config: OmniConfig = field(default_factory=OmniConfig)

    def encode(self) -> bytes:
        return self.authentication.encode() + self.omni_config.encode()

    @classmethod
    def from_args(cls, args: bytes) -> OmnilockArgs:
        """Parse the script args of an omnilock script."""
        args = bytes(args)
        if len(args) < 22:
            raise ValueError("byte array at least should be 22 bytes")
        return cls(
            authentication=Authentication.decode(args[:21]),
            omni_config=OmniConfig.decode(args[21:]),
        )