"""
Universal (32-byte, wire-level) addresses and their native renderings.
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import to_checksum_address

from .chain_types import ChainContext

_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(_BASE58_ALPHABET)}

UNIVERSAL_ADDRESS_LENGTH = 32
EVM_ADDRESS_LENGTH = 20


def base58_decode(value: str) -> bytes:
    if not value:
        return b""
    num = 0
    for char in value:
        if char not in _BASE58_INDEX:
            raise ValueError("Invalid base58 character")
        num = num * 58 + _BASE58_INDEX[char]
    combined = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    pad = len(value) - len(value.lstrip("1"))
    return b"\x00" * pad + combined


def base58_encode(data: bytes) -> str:
    if not data:
        return ""
    num = int.from_bytes(data, "big")
    encoded = ""
    while num > 0:
        num, rem = divmod(num, 58)
        encoded = _BASE58_ALPHABET[rem] + encoded
    pad = 0
    for byte in data:
        if byte == 0:
            pad += 1
        else:
            break
    return "1" * pad + encoded


@dataclass(frozen=True)
class UniversalAddress:
    """A chain-agnostic 32-byte address as it appears in attestations."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != UNIVERSAL_ADDRESS_LENGTH:
            raise ValueError(
                f"Universal address must be {UNIVERSAL_ADDRESS_LENGTH} bytes, got {len(self.raw)}"
            )

    @classmethod
    def from_hex(cls, value: str) -> "UniversalAddress":
        hex_part = value[2:] if value.lower().startswith("0x") else value
        return cls(bytes.fromhex(hex_part.rjust(UNIVERSAL_ADDRESS_LENGTH * 2, "0")))

    @classmethod
    def from_native(cls, value: str, context: ChainContext) -> "UniversalAddress":
        """Left-pad a native address to the universal form."""
        if context == ChainContext.SOLANA:
            raw = base58_decode(value)
        else:
            hex_part = value[2:] if value.lower().startswith("0x") else value
            raw = bytes.fromhex(hex_part)
        return cls(raw.rjust(UNIVERSAL_ADDRESS_LENGTH, b"\x00"))

    def to_native(self, context: ChainContext) -> str:
        """Render this address the way chains of ``context`` spell addresses."""
        if context == ChainContext.ETH:
            head = self.raw[: UNIVERSAL_ADDRESS_LENGTH - EVM_ADDRESS_LENGTH]
            if any(head):
                raise ValueError(f"{self.hex()} is not a valid EVM address")
            return to_checksum_address("0x" + self.raw[-EVM_ADDRESS_LENGTH:].hex())
        if context == ChainContext.SOLANA:
            return base58_encode(self.raw)
        # Sui/Aptos use the full 32-byte hex form. Cosmos chains would need a
        # bech32 prefix that is not known here, so they get the same hex form.
        return self.hex()

    def hex(self) -> str:
        return "0x" + self.raw.hex()

    def __str__(self) -> str:
        return self.hex()
