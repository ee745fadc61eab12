"""Document scanner (UNO: single function)."""

from collections.abc import Iterable
from pathlib import Path

from ...utils.get_logger import get_logger
from ._constants import DOCUMENT_EXTENSION
from ._walk_documents import _walk_documents

logger = get_logger("vault.scan")


def scan_documents(
    root: Path | str,
    extension: str = DOCUMENT_EXTENSION,
    exclude_dirnames: Iterable[str] = (),
) -> list[Path]:
    """Find every document under the vault root.

    Args:
        root: Vault root directory
        extension: Recognized document extension
        exclude_dirnames: Directory names pruned from the walk

    Returns:
        Document paths (root joined with the relative path) in traversal order

    Raises:
        FilesystemError: If the root or any directory below it cannot be traversed
    """
    documents = list(_walk_documents(root, extension, exclude_dirnames))
    logger.info("Found %d documents under %s", len(documents), root)
    return documents
