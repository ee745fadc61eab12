"""LinkLocation model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LinkLocation:
    """Where a link target is referenced: source document and 1-based line."""

    source_file: Path
    line_number: int

    def describe(self) -> str:
        return f"{self.source_file} (line {self.line_number})"
