"""Exceptions raised while reading swz archives."""

from __future__ import annotations


class SwzError(Exception):
    """Base class for swz archive errors."""


class KeyChecksumMismatchError(SwzError):
    """The archive header does not match the supplied key."""

    def __init__(self, expected: int, calculated: int) -> None:
        self.expected = expected
        self.calculated = calculated
        super().__init__(
            f"key checksum mismatch (expected {expected}, found {calculated})"
        )


class FileChecksumMismatchError(SwzError):
    """An entry's content does not match its stored checksum."""

    def __init__(self, expected: int, calculated: int) -> None:
        self.expected = expected
        self.calculated = calculated
        super().__init__(
            f"file checksum mismatch (expected {expected}, found {calculated})"
        )


class DecompressedFileSizeMismatchError(SwzError):
    """An entry decompressed to a size other than the one recorded."""

    def __init__(self, expected: int, calculated: int) -> None:
        self.expected = expected
        self.calculated = calculated
        super().__init__(
            "decompressed file size mismatch "
            f"(expected {expected}, found {calculated})"
        )