# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

from __future__ import annotations

import argparse
import sys

from bodystream.buffer_stream import BufferStream
from bodystream.errors import SeekOutOfRangeError
from bodystream.interface import Whence
from bodystream.source import FileRequest

WHENCE_CHOICES = {
    "start": Whence.START,
    "current": Whence.CURRENT,
    "end": Whence.END,
}


def build_stream(args: argparse.Namespace) -> BufferStream:
    return BufferStream(FileRequest(args.uri, max_bytes=args.max_bytes))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load a file as a request body and print a window of it."
    )
    parser.add_argument("uri", help="URI/path of the body to read.")
    parser.add_argument("--offset", type=int, default=None, help="Seek to this offset first.")
    parser.add_argument(
        "--whence",
        choices=sorted(WHENCE_CHOICES),
        default="start",
        help="Reference point for --offset (default: start).",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=None,
        help="Number of bytes to read (default: everything after the cursor).",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=None,
        help="Only buffer this many bytes of the file (default: all).",
    )
    args = parser.parse_args(argv)
    if args.length is not None and args.length < 0:
        parser.error("--length must be non-negative")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        stream = build_stream(args)
    except FileNotFoundError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1

    with stream:
        if stream.get_size() == 0:
            print("[info] empty body", file=sys.stderr)
        if args.offset is not None:
            try:
                stream.seek(args.offset, WHENCE_CHOICES[args.whence])
            except SeekOutOfRangeError as error:
                print(f"[error] {error}", file=sys.stderr)
                return 1
        if args.length is None:
            data = stream.get_contents()
        else:
            data = stream.read(args.length)

    sys.stdout.buffer.write(data)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
