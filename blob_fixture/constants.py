from pathlib import Path

# Reference configuration; every value can be overridden from the command line.
DEFAULT_TARGET = Path(".data")
BLOCK_SIZE     = 126976  # 4096 field elements x 31 bytes
MAX_BLOB       = 256     # inclusive ceiling, so MAX_BLOB + 1 blocks are written
