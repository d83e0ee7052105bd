"""Command that encrypts or decrypts a file in place with the built-in key."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .cipher import decrypt_file, encrypt_file
from .key import key_expansion

DEFAULT_KEY = bytes(range(16))
DEFAULT_PATH = "TESTFILE.txt"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aes128", description="Encrypt a file in place with a fixed 128-bit key."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="file to process")
    parser.add_argument(
        "-d", "--decrypt", action="store_true", help="decrypt instead of encrypting"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    keys = key_expansion(DEFAULT_KEY)
    action = decrypt_file if args.decrypt else encrypt_file
    try:
        action(args.path, keys)
    except OSError as exc:
        print(f"aes128: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())