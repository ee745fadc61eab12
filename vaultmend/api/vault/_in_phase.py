"""Tag filesystem errors with the phase that raised them (private)."""

from collections.abc import Iterator
from contextlib import contextmanager

from .FilesystemError import FilesystemError


@contextmanager
def _in_phase(phase: str) -> Iterator[None]:
    try:
        yield
    except FilesystemError as exc:
        if exc.phase is None:
            exc.phase = phase
        raise
