"""Reconciler (UNO: single function)."""

from collections.abc import Mapping
from types import MappingProxyType

from .LinkLocation import LinkLocation


def reconcile(
    links: Mapping[str, tuple[LinkLocation, ...]],
    existing: Mapping[str, tuple[str, ...]],
) -> Mapping[str, tuple[LinkLocation, ...]]:
    """Return the link targets with no document of the same basename anywhere in the vault."""
    return MappingProxyType({target: locations for target, locations in links.items() if target not in existing})
