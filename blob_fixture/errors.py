# blob_fixture/errors.py
from pathlib import Path


class FixtureError(Exception):
    """Base for failures that abort a generation run."""
    exit_code = 1

    @property
    def kind(self) -> str:
        return type(self).__name__


class FilesystemError(FixtureError):
    """Target path unwritable, directory missing, disk full or permission denied."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ResourceExhaustionError(FixtureError):
    """Random source or block allocation could not be satisfied."""
    exit_code = 3
