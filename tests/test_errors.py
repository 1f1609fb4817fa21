import pytest

from bhswz.errors import (
    DecompressedFileSizeMismatchError,
    FileChecksumMismatchError,
    KeyChecksumMismatchError,
    SwzError,
)


def test_key_checksum_message_and_fields():
    err = KeyChecksumMismatchError(1, 2)
    assert str(err) == "key checksum mismatch (expected 1, found 2)"
    assert (err.expected, err.calculated) == (1, 2)


def test_file_checksum_message_and_fields():
    err = FileChecksumMismatchError(10, 20)
    assert str(err) == "file checksum mismatch (expected 10, found 20)"
    assert (err.expected, err.calculated) == (10, 20)


def test_size_mismatch_message_and_fields():
    err = DecompressedFileSizeMismatchError(5, 6)
    assert str(err) == "decompressed file size mismatch (expected 5, found 6)"
    assert (err.expected, err.calculated) == (5, 6)


@pytest.mark.parametrize(
    "cls", [KeyChecksumMismatchError, FileChecksumMismatchError, DecompressedFileSizeMismatchError]
)
def test_errors_are_swz_errors_with_fields(cls):
    err = cls(3, 4)
    assert isinstance(err, SwzError)
    assert (err.expected, err.calculated) == (3, 4)
    assert str(err).endswith("(expected 3, found 4)")