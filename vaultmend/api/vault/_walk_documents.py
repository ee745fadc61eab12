"""Recursive document walk shared by the scanner and the existing-name index (private)."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .FilesystemError import FilesystemError


def _raise_walk_error(exc: OSError) -> None:
    raise FilesystemError(f"Cannot traverse {exc.filename}: {exc.strerror or exc}", exc.filename) from exc


def _walk_documents(root: Path | str, extension: str, exclude_dirnames: Iterable[str] = ()) -> Iterator[Path]:
    """Yield every file under root whose name ends with extension.

    Entries are visited in sorted order so repeated runs report identically.
    Symlinked directories are not followed. Any directory that cannot be
    listed, including the root itself, aborts the walk.
    """
    excluded = set(exclude_dirnames)
    root_str = os.fspath(root)
    for dirpath, dirnames, filenames in os.walk(root_str, onerror=_raise_walk_error):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for name in sorted(filenames):
            if name.endswith(extension):
                yield Path(dirpath) / name
