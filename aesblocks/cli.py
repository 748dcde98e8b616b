"""Command line: encrypt and decrypt a file's contents, reporting timings."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from .blocks import Blocks
from .utils import read_message

KEY = bytes(range(32))

_PLAIN_HEADER = b"====    Plain Text     ===="
_PLAIN_FOOTER = b"==== End of Plain Text ===="
_CIPHER_HEADER = b"===    Cipher Text     ==="
_CIPHER_FOOTER = b"=== End of Cipher Text ==="


def _write(line: bytes) -> None:
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(line.decode("latin-1") + "\n")
    else:
        stream.write(line + b"\n")
        stream.flush()


def _timed(action) -> int:
    start = time.perf_counter_ns()
    action()
    return (time.perf_counter_ns() - start) // 1000


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aesblocks",
        description="Encrypt and decrypt a file with a fixed 256-bit key, showing each stage.",
    )
    parser.add_argument("file", help="file whose contents are encrypted")
    args = parser.parse_args(argv)

    try:
        message = read_message(args.file)
    except OSError:
        print("File not Open.", file=sys.stderr)
        return 1

    sys.stdout.flush()
    blocks = Blocks(message, KEY)
    _write(f"***Time to Key Expand: {blocks.key_expansion_time} us".encode())

    _write(_PLAIN_HEADER)
    _write(blocks.visible())
    _write(_PLAIN_FOOTER)

    elapsed = _timed(blocks.encrypt)
    _write(f"***Time to Encrypt: {elapsed} us".encode())
    _write(_CIPHER_HEADER)
    _write(blocks.visible())
    _write(_CIPHER_FOOTER)

    elapsed = _timed(blocks.decrypt)
    _write(f"***Time to Decrypt: {elapsed} us".encode())
    _write(_PLAIN_HEADER)
    _write(blocks.visible())
    _write(_PLAIN_FOOTER)
    return 0


if __name__ == "__main__":
    sys.exit(main())