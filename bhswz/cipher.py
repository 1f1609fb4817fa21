"""Key checksum and buffer masking used by the swz format."""

from __future__ import annotations

from .swzrandom import SwzRandom

_MASK = 0xFFFFFFFF
_KEY_CHECKSUM_BASE = 0x2DF4A1CD


def calculate_key_checksum(key: int, rng: SwzRandom) -> int:
    """Return the checksum that proves knowledge of ``key``."""
    checksum = _KEY_CHECKSUM_BASE
    for _ in range(key % 31 + 5):
        checksum ^= rng.next()
    return checksum


def _xor_byte(rng: SwzRandom, i: int) -> int:
    return (rng.next() >> (i % 16)) & 0xFF


def _update_checksum(checksum: int, byte: int, i: int) -> int:
    shift = i % 7 + 1
    rotated = ((checksum >> shift) | (checksum << (32 - shift))) & _MASK
    return rotated ^ byte


def decrypt_buffer(data: bytes, rng: SwzRandom) -> tuple[bytes, int]:
    """Unmask ``data``; return the plain bytes and their checksum."""
    checksum = rng.next()
    plain = bytearray()
    for i, byte in enumerate(data):
        value = byte ^ _xor_byte(rng, i)
        plain.append(value)
        checksum = _update_checksum(checksum, value, i)
    return bytes(plain), checksum


def encrypt_buffer(data: bytes, rng: SwzRandom) -> tuple[bytes, int]:
    """Mask ``data``; return the masked bytes and the checksum of the input."""
    checksum = rng.next()
    masked = bytearray()
    for i, byte in enumerate(data):
        checksum = _update_checksum(checksum, byte, i)
        masked.append(byte ^ _xor_byte(rng, i))
    return bytes(masked), checksum