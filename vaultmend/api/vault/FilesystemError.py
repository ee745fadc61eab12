"""Filesystem error raised by every vault phase."""

from pathlib import Path


class FilesystemError(Exception):
    """Raised when a directory or file cannot be traversed, read or created.

    The phase is filled in by the command that ran the failing component, so
    the same error raised from the scanner reads differently when the scanner
    runs as part of the existing-name index.
    """

    def __init__(self, message: str, path: Path | str | None = None, phase: str | None = None):
        self.path = Path(path) if path is not None else None
        self.phase = phase
        super().__init__(message)
