"""Materialize result model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MaterializeResult:
    """Relative paths of the placeholder documents created or left alone."""

    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
