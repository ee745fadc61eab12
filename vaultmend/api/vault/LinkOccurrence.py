"""LinkOccurrence model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path

from .LinkLocation import LinkLocation


@dataclass(frozen=True)
class LinkOccurrence:
    """A single [[target]] found on one line of one document."""

    target: str
    source_file: Path
    line_number: int

    @property
    def location(self) -> LinkLocation:
        return LinkLocation(source_file=self.source_file, line_number=self.line_number)
