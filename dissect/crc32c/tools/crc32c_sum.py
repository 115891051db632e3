from __future__ import annotations

import argparse
import sys

from dissect.crc32c.api import check_checksum, extend_sequence
from dissect.crc32c.engine import crc32c_stream


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print CRC32C (Castagnoli) checksums")
    parser.add_argument("file", nargs="*", help="files to checksum, - or nothing reads from stdin")
    parser.add_argument("-s", "--seed", type=_int, default=0, help="prior checksum to extend from")
    parser.add_argument("-e", "--element-size", type=_int, help="checksum VALUES as integers of this size in bytes")
    parser.add_argument("-v", "--values", type=_int, nargs="+", metavar="VALUE", help="integer values to checksum")
    parser.add_argument("--chunk-size", type=_int, help="read size in bytes")
    parser.add_argument("--decimal", action="store_true", help="print checksums as decimal numbers")
    args = parser.parse_args(argv)

    if (args.element_size is None) != (args.values is None):
        parser.error("--element-size and --values must be used together")

    if args.values is not None and args.file:
        parser.error("--values cannot be combined with files")

    if args.chunk_size is not None and args.chunk_size <= 0:
        parser.error("--chunk-size must be greater than zero")

    try:
        seed = check_checksum(args.seed)

        if args.values is not None:
            crc = extend_sequence(args.element_size, dict(enumerate(args.values, 1)), seed)
            print(fmt(crc, args.decimal))
            return

        for name in args.file or ["-"]:
            if name == "-":
                crc = crc32c_stream(sys.stdin.buffer, seed, args.chunk_size)
            else:
                with open(name, "rb") as fh:
                    crc = crc32c_stream(fh, seed, args.chunk_size)
            print(f"{fmt(crc, args.decimal)}  {name}")
    except (ValueError, OSError) as e:
        parser.exit(1, f"{parser.prog}: {e}\n")


def _int(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None


def fmt(crc: int, decimal: bool = False) -> str:
    return str(crc) if decimal else f"{crc:08x}"


if __name__ == "__main__":
    main()
