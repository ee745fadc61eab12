"""Existing-name index builder (UNO: single function)."""

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from ...utils.get_logger import get_logger
from ._constants import DOCUMENT_EXTENSION
from ._walk_documents import _walk_documents

logger = get_logger("vault.index")


def index_existing(
    root: Path | str,
    extension: str = DOCUMENT_EXTENSION,
    exclude_dirnames: Iterable[str] = (),
) -> Mapping[str, tuple[str, ...]]:
    """Map each document basename (extension stripped) to its paths relative to root.

    Documents sharing a basename in different directories are all kept.

    Raises:
        FilesystemError: If the root or any directory below it cannot be traversed
    """
    root_path = Path(root)
    existing: dict[str, list[str]] = {}
    for document in _walk_documents(root, extension, exclude_dirnames):
        basename = document.name[: -len(extension)]
        existing.setdefault(basename, []).append(document.relative_to(root_path).as_posix())

    duplicates = sum(1 for paths in existing.values() if len(paths) > 1)
    if duplicates:
        logger.info("%d basenames are shared by more than one document", duplicates)
    return MappingProxyType({name: tuple(paths) for name, paths in existing.items()})
