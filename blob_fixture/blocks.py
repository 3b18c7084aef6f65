# blob_fixture/blocks.py
import secrets
from typing import Iterator, Tuple

from .errors import ResourceExhaustionError


def random_block(size: int) -> bytes:
    """Draw `size` bytes from the OS CSPRNG."""
    try:
        return secrets.token_bytes(size)
    except MemoryError as e:
        raise ResourceExhaustionError(f"cannot allocate a {size}-byte block") from e
    except NotImplementedError as e:
        # os.urandom raises this when no OS randomness source is available
        raise ResourceExhaustionError("no cryptographic random source available") from e


def encode_block(block: bytes) -> str:
    return block.hex()


def iter_encoded_blocks(block_size: int, block_count: int) -> Iterator[Tuple[int, str]]:
    """
    Yield (index, hex chunk) for index 0..block_count inclusive.
    Blocks are drawn lazily, so only one is held at a time.
    """
    for i in range(block_count + 1):
        yield i, encode_block(random_block(block_size))
