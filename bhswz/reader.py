"""Reading entries out of an swz archive."""

from __future__ import annotations

import struct
import zlib
from collections.abc import Iterator
from typing import BinaryIO

from .cipher import calculate_key_checksum, decrypt_buffer
from .errors import (
    DecompressedFileSizeMismatchError,
    FileChecksumMismatchError,
    KeyChecksumMismatchError,
    SwzError,
)
from .swzrandom import SwzRandom

_MASK = 0xFFFFFFFF


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value <= _MASK:
        raise ValueError(f"{name} must be a 32-bit unsigned integer, got {value}")


def _read_up_to(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = _read_up_to(stream, size)
    if len(data) < size:
        raise EOFError("unexpected end of swz data")
    return data


class SwzReader:
    """Reads and verifies the entries of an swz archive from a binary stream."""

    def __init__(self, stream: BinaryIO, key: int) -> None:
        _check_u32("key", key)
        self._stream = stream
        checksum, seed = struct.unpack(">II", _read_exact(stream, 8))
        self._rng = SwzRandom(key ^ seed)
        calculated = calculate_key_checksum(key, self._rng)
        if checksum != calculated:
            raise KeyChecksumMismatchError(checksum, calculated)

    def read_file(self) -> bytes | None:
        """Return the next entry's content, or None at the end of the archive."""
        head = self._stream.read(4)
        if not head:
            return None
        if len(head) < 4:
            head += _read_exact(self._stream, 4 - len(head))

        compressed_size = struct.unpack(">I", head)[0] ^ self._rng.next()
        decompressed_size = struct.unpack(">I", _read_exact(self._stream, 4))[0] ^ self._rng.next()
        (checksum,) = struct.unpack(">I", _read_exact(self._stream, 4))

        masked = _read_up_to(self._stream, compressed_size)
        compressed, calculated = decrypt_buffer(masked, self._rng)
        if checksum != calculated:
            raise FileChecksumMismatchError(checksum, calculated)

        decompressor = zlib.decompressobj()
        try:
            content = decompressor.decompress(compressed)
        except zlib.error as exc:
            raise SwzError(f"corrupt compressed data: {exc}") from exc
        if not decompressor.eof:
            raise SwzError("corrupt compressed data: stream is truncated")

        if len(content) != decompressed_size:
            raise DecompressedFileSizeMismatchError(decompressed_size, len(content))
        return content

    def __iter__(self) -> Iterator[bytes]:
        while (content := self.read_file()) is not None:
            yield content