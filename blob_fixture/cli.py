import argparse
import sys

from .constants import BLOCK_SIZE, DEFAULT_TARGET, MAX_BLOB
from .errors import FixtureError
from .generator import generate


def _int_at_least(minimum: int):
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {value}")
        return value
    return parse


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="blob-fixture",
        description="Append hex-encoded cryptographically random blocks to a fixture file.",
    )
    ap.add_argument("-o", "--target", default=str(DEFAULT_TARGET),
                    help=f"output file, appended to (default {DEFAULT_TARGET})")
    ap.add_argument("-s", "--block-size", type=_int_at_least(1), default=BLOCK_SIZE,
                    metavar="BYTES", help=f"random bytes per block (default {BLOCK_SIZE})")
    ap.add_argument("-n", "--block-count", type=_int_at_least(0), default=MAX_BLOB,
                    metavar="COUNT", help=f"number of blocks minus one (default {MAX_BLOB})")
    ap.add_argument("--dry-run", action="store_true", help="print the planned append, write nothing")
    ap.add_argument("-v", "--verbose", action="store_true", help="print one line per block")
    return ap


def main():
    args = build_parser().parse_args()
    try:
        generate(args.target, args.block_size, args.block_count,
                 dry_run=args.dry_run, verbose=args.verbose)
    except FixtureError as e:
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        sys.exit(e.exit_code)
    sys.exit(0)
