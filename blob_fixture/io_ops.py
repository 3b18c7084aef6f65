# blob_fixture/io_ops.py
import stat
from pathlib import Path

from .errors import FilesystemError


def check_target(path: Path | str) -> Path:
    """
    Return `path` as a Path once its parent is a reachable directory and the
    target itself is not a directory. Directories are never created here.
    Writability is only proven by the first append.
    """
    path = Path(path)
    parent = path.parent
    try:
        parent_mode = parent.stat().st_mode
    except FileNotFoundError as e:
        raise FilesystemError(f"directory does not exist: {parent}", path) from e
    except OSError as e:
        raise FilesystemError(f"cannot access {parent}: {e.strerror or e}", path) from e
    if not stat.S_ISDIR(parent_mode):
        raise FilesystemError(f"not a directory: {parent}", path)

    try:
        target_mode = path.stat().st_mode
    except FileNotFoundError:
        return path
    except OSError as e:
        raise FilesystemError(f"cannot access {path}: {e.strerror or e}", path) from e
    if stat.S_ISDIR(target_mode):
        raise FilesystemError(f"target is a directory: {path}", path)
    return path


def append_chunk(path: Path, chunk: str) -> int:
    """Append one encoded chunk as a discrete write and close the handle."""
    try:
        with open(path, "a", encoding="ascii", newline="") as f:
            return f.write(chunk)
    except OSError as e:
        raise FilesystemError(f"cannot append to {path}: {e.strerror or e}", path) from e
