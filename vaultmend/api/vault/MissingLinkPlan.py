"""Missing-link plan model."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .LinkLocation import LinkLocation


@dataclass(frozen=True)
class MissingLinkPlan:
    """Everything one reconciliation pass learned about a vault.

    Built by ``plan()`` without touching the filesystem beyond reads;
    ``apply()`` turns ``missing`` into placeholder documents.
    """

    root: Path
    extension: str
    documents: tuple[Path, ...]
    links: Mapping[str, tuple[LinkLocation, ...]]
    existing: Mapping[str, tuple[str, ...]]
    missing: Mapping[str, tuple[LinkLocation, ...]]

    @property
    def duplicates(self) -> dict[str, tuple[str, ...]]:
        """Basenames shared by more than one document."""
        return {name: paths for name, paths in self.existing.items() if len(paths) > 1}

    def target_file(self, target: str) -> str:
        return f"{target}{self.extension}"
