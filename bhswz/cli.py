"""Command line for dumping and packing swz archives."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import SwzError
from .filename import get_swz_file_name
from .reader import SwzReader
from .writer import SwzWriter


def dump(swz_path, output_dir, key: int) -> list[Path]:
    """Extract every recognisable entry of an archive; return the paths written."""
    output = Path(output_dir)
    output.mkdir(parents=True, exist_ok=True)
    written = []
    with open(swz_path, "rb") as stream:
        for content in SwzReader(stream, key):
            name = get_swz_file_name(content.decode("utf-8"))
            if name is None:
                print("failed to figure out file name")
                continue
            print(f"found {name}")
            path = output / name
            path.write_bytes(content)
            written.append(path)
    return written


def pack(input_dir, swz_path, key: int, seed: int = 0) -> list[Path]:
    """Write every regular file of a directory into a new archive."""
    inserted = []
    with open(swz_path, "wb") as stream:
        writer = SwzWriter(stream, key, seed)
        for path in sorted(Path(input_dir).iterdir()):
            if not path.is_file():
                continue
            print(f"inserting {path}")
            writer.write_file(path.read_bytes())
            inserted.append(path)
    return inserted


def _u32(text: str) -> int:
    value = int(text, 0)
    if not 0 <= value <= 0xFFFFFFFF:
        raise argparse.ArgumentTypeError(f"{text} is not a 32-bit unsigned integer")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bhswz", description="Read and write swz archives.")
    commands = parser.add_subparsers(dest="command", required=True)

    dump_cmd = commands.add_parser("dump", help="extract an archive into a directory")
    dump_cmd.add_argument("swz_path")
    dump_cmd.add_argument("output_dir")
    dump_cmd.add_argument("key", type=_u32)

    pack_cmd = commands.add_parser("pack", help="pack a directory into an archive")
    pack_cmd.add_argument("input_dir")
    pack_cmd.add_argument("swz_path")
    pack_cmd.add_argument("key", type=_u32)
    pack_cmd.add_argument("--seed", type=_u32, default=0)
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    try:
        if args.command == "dump":
            dump(args.swz_path, args.output_dir, args.key)
        else:
            pack(args.input_dir, args.swz_path, args.key, args.seed)
    except (SwzError, OSError, EOFError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())