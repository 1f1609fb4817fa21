# bhswz

Read and write Brawlhalla's `.swz` archives.

An SWZ archive is a sequence of zlib-compressed files. Each file is masked
with a keystream derived from a 32-bit key and carries a checksum. This
package unmasks, verifies and decompresses those files, works out a name for
each one from its contents, and packs files back into an archive.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Command line

Installing the package provides the `bhswz` command with two subcommands.

```
bhswz dump SWZ_PATH OUTPUT_DIR KEY
bhswz pack INPUT_DIR SWZ_PATH KEY [--seed SEED]
```

- `dump` creates `OUTPUT_DIR` if needed and writes every file of the archive
  into it, named from its contents: `LevelDesc_<LevelName>.xml`,
  `CutsceneType_<CutsceneName>.xml`, `<Element>.xml` for other XML, or
  `<Header>.csv` for CSV whose first line is a single word. Files whose name
  cannot be worked out are reported and skipped.
- `pack` writes every regular file directly inside `INPUT_DIR`, in sorted
  order, into a new archive at `SWZ_PATH`. `--seed` (default 0) only changes
  how the output is masked.

`KEY` and `SEED` are 32-bit unsigned integers, written in decimal or with a
`0x`, `0o` or `0b` prefix. On an archive error, an I/O error, truncated data or
a file that is not UTF-8 text, the command prints `error: ...` to standard
error and exits with status 1.

The Python functions behind the subcommands are `bhswz.cli.dump(swz_path,
output_dir, key)` and `bhswz.cli.pack(input_dir, swz_path, key, seed=0)`; each
returns the list of paths it wrote or inserted.

## Library use

Reading an archive:

```python
from bhswz.reader import SwzReader
from bhswz.filename import get_swz_file_name

archive_key = 12345  # made-up value; use your archive's key

with open("Game.swz", "rb") as stream:
    for content in SwzReader(stream, archive_key):
        print(get_swz_file_name(content.decode("utf-8")))
```

`SwzReader.read_file()` returns the next file's bytes, or `None` at the end of
the archive; iterating over the reader yields the same bytes one file at a
time.

Writing an archive:

```python
from bhswz.writer import SwzWriter

archive_key = 12345

with open("Game.swz", "wb") as stream:
    writer = SwzWriter(stream, archive_key, 0)
    writer.write_file(b"<ExampleType>\n</ExampleType>\n")
```

The lower-level pieces are available too: `bhswz.swzrandom.SwzRandom` (the
keystream generator) and `bhswz.cipher` with `calculate_key_checksum`,
`encrypt_buffer` and `decrypt_buffer`.

## Errors

Problems with archive contents raise subclasses of `bhswz.errors.SwzError`:

- `KeyChecksumMismatchError`: the key does not match the archive.
- `FileChecksumMismatchError`: a file's masked data is corrupt.
- `DecompressedFileSizeMismatchError`: a file decompressed to the wrong size.

Each of these carries `expected` and `calculated` attributes. Corrupt or
truncated compressed data raises `SwzError` itself, and an archive that ends
in the middle of a header raises `EOFError`. A key or seed outside the 32-bit
unsigned range raises `ValueError`.

## What it does not do

The package does not discover an archive's key; you must supply it.

## Tests

```
pip install ".[test]"
pytest
```