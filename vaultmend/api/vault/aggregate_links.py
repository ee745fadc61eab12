"""Link aggregator (UNO: single function)."""

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from ...utils.get_logger import get_logger
from .extract_links import extract_links
from .LinkLocation import LinkLocation

logger = get_logger("vault.aggregate")


def aggregate_links(documents: Iterable[Path]) -> Mapping[str, tuple[LinkLocation, ...]]:
    """Merge the links of every document into one index keyed by target.

    Per-target occurrences follow document order, then line order.

    Raises:
        FilesystemError: On the first document that cannot be read
    """
    merged: dict[str, list[LinkLocation]] = {}
    document_count = 0
    for document in documents:
        occurrences = extract_links(document)
        logger.debug("%s: %d links", document, len(occurrences))
        for occurrence in occurrences:
            merged.setdefault(occurrence.target, []).append(occurrence.location)
        document_count += 1

    logger.info("Collected %d distinct link targets from %d documents", len(merged), document_count)
    return MappingProxyType({target: tuple(locations) for target, locations in merged.items()})
