"""Wikilink extraction from documents."""

from collections.abc import Iterator
from pathlib import Path

from ._constants import WIKILINK_PATTERN
from .FilesystemError import FilesystemError
from .LinkOccurrence import LinkOccurrence


def parse_wikilinks(text: str, source_file: Path | str) -> Iterator[LinkOccurrence]:
    """Extract all wiki links from markdown text.

    Args:
        text: Markdown content to parse
        source_file: Document the text came from

    Yields:
        LinkOccurrence for each [[...]] found, targets taken verbatim
    """
    source = Path(source_file)
    for line_num, line in enumerate(text.splitlines(), start=1):
        for match in WIKILINK_PATTERN.finditer(line):
            yield LinkOccurrence(target=match.group(1), source_file=source, line_number=line_num)


def extract_links(path: Path | str) -> list[LinkOccurrence]:
    """Read one document line by line and collect its wiki links.

    Raises:
        FilesystemError: If the document cannot be opened or read
    """
    source = Path(path)
    occurrences: list[LinkOccurrence] = []
    try:
        with source.open(encoding="utf-8") as fh:
            for line_num, line in enumerate(fh, start=1):
                for match in WIKILINK_PATTERN.finditer(line):
                    occurrences.append(LinkOccurrence(target=match.group(1), source_file=source, line_number=line_num))
    except OSError as exc:
        raise FilesystemError(f"Cannot read {source}: {exc.strerror or exc}", source) from exc
    except UnicodeDecodeError as exc:
        raise FilesystemError(f"Cannot decode {source}: {exc}", source) from exc
    return occurrences
