# blob_fixture/generator.py
from pathlib import Path

from .blocks import iter_encoded_blocks
from .constants import BLOCK_SIZE, DEFAULT_TARGET, MAX_BLOB
from .io_ops import append_chunk, check_target


def expected_length(block_size: int, block_count: int) -> int:
    """Characters a single run adds: (block_count + 1) hex chunks of 2 * block_size."""
    return (block_count + 1) * 2 * block_size


def _check_params(block_size, block_count):
    for name, value in (("block_size", block_size), ("block_count", block_count)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
    if block_size < 1:
        raise ValueError(f"block_size must be positive, got {block_size}")
    if block_count < 0:
        raise ValueError(f"block_count must be non-negative, got {block_count}")


def generate(target_path: Path | str = DEFAULT_TARGET,
             block_size: int = BLOCK_SIZE,
             block_count: int = MAX_BLOB,
             *, dry_run: bool = False, verbose: bool = False) -> None:
    """
    Append block_count + 1 hex-encoded random blocks of block_size bytes to
    target_path, creating it if absent. Each append finishes before the next
    block is drawn, so chunks land in generation order.

    Errors propagate: FilesystemError for the target, ResourceExhaustionError
    for the random source. A partially grown file is left in place.
    """
    _check_params(block_size, block_count)
    target = check_target(target_path)

    total = block_count + 1
    if dry_run:
        print(f"APPEND: {total} x {block_size} bytes -> {target} "
              f"({expected_length(block_size, block_count)} chars)")
        return

    written = 0
    for i, chunk in iter_encoded_blocks(block_size, block_count):
        written += append_chunk(target, chunk)
        if verbose:
            print(f"BLOCK {i + 1}/{total} -> {target}")

    if verbose:
        print(f"Done. Appended {written} chars to {target}.")
