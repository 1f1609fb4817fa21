"""Writing entries into an swz archive."""

from __future__ import annotations

import struct
import zlib
from typing import BinaryIO

from .cipher import calculate_key_checksum, encrypt_buffer
from .swzrandom import SwzRandom

_MASK = 0xFFFFFFFF


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value <= _MASK:
        raise ValueError(f"{name} must be a 32-bit unsigned integer, got {value}")


class SwzWriter:
    """Writes compressed, masked entries of an swz archive to a binary stream."""

    def __init__(self, stream: BinaryIO, key: int, seed: int = 0) -> None:
        _check_u32("key", key)
        _check_u32("seed", seed)
        self._stream = stream
        self._rng = SwzRandom(key ^ seed)
        checksum = calculate_key_checksum(key, self._rng)
        stream.write(struct.pack(">II", checksum, seed))

    def write_file(self, file_content: bytes) -> None:
        """Append one entry holding ``file_content``."""
        data = bytes(file_content)
        if len(data) > _MASK:
            raise ValueError("file is too large for an swz archive")

        compressed_size_xor = self._rng.next()
        decompressed_size_xor = self._rng.next()

        compressed = zlib.compress(data, 9)
        if len(compressed) > _MASK:
            raise ValueError("compressed file is too large for an swz archive")

        masked, checksum = encrypt_buffer(compressed, self._rng)
        self._stream.write(
            struct.pack(
                ">III",
                len(compressed) ^ compressed_size_xor,
                len(data) ^ decompressed_size_xor,
                checksum,
            )
        )
        self._stream.write(masked)