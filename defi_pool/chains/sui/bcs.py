"""Pure BCS (Binary Canonical Serialization) helpers for SUI — no I/O.

Only the primitives needed to serialize a programmable transaction and to
read back u64 return values are implemented.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

ADDRESS_LENGTH = 32
U64_MAX = 2**64 - 1


def encode_uleb128(value: int) -> bytes:
    """Encode a non-negative integer as ULEB128 (used for lengths and tags)."""
    if value < 0:
        raise ValueError(f"ULEB128 value must be non-negative, got {value}")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_u8(value: int) -> bytes:
    return value.to_bytes(1, "little")


def encode_u16(value: int) -> bytes:
    return value.to_bytes(2, "little")


def encode_u64(value: int) -> bytes:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"u64 out of range: {value}")
    return value.to_bytes(8, "little")


def encode_bool(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def encode_bytes(data: bytes) -> bytes:
    """Length-prefixed byte vector."""
    return encode_uleb128(len(data)) + data


def encode_str(value: str) -> bytes:
    return encode_bytes(value.encode("utf-8"))


def normalize_address(address: str) -> str:
    """Return the canonical 0x-prefixed, 64-hex-digit form of an address.

    Examples:
        "0x2" → "0x000…0002"
    """
    hex_part = address.lower().removeprefix("0x")
    if not hex_part or len(hex_part) > ADDRESS_LENGTH * 2:
        raise ValueError(f"Invalid SUI address: {address!r}")
    return "0x" + hex_part.zfill(ADDRESS_LENGTH * 2)


def encode_address(address: str) -> bytes:
    return bytes.fromhex(normalize_address(address)[2:])


def encode_vector(items: Iterable[T], encoder: Callable[[T], bytes]) -> bytes:
    encoded = [encoder(item) for item in items]
    return encode_uleb128(len(encoded)) + b"".join(encoded)


def decode_u64_le(data: Sequence[int] | bytes) -> int:
    """Decode an 8-byte little-endian unsigned integer.

    Examples:
        [1, 0, 0, 0, 0, 0, 0, 0] → 1
        [255] * 8 → 2**64 - 1
    """
    raw = bytes(data)
    if len(raw) != 8:
        raise ValueError(f"Expected 8 bytes for u64, got {len(raw)}")
    return int.from_bytes(raw, "little")
