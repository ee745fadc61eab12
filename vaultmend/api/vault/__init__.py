"""Vault API module: find wiki-link targets with no document and create them."""

from .aggregate_links import aggregate_links
from .apply import apply
from .extract_links import extract_links, parse_wikilinks
from .FilesystemError import FilesystemError
from .index_existing import index_existing
from .LinkLocation import LinkLocation
from .LinkOccurrence import LinkOccurrence
from .materialize import materialize
from .MaterializeResult import MaterializeResult
from .MissingLinkPlan import MissingLinkPlan
from .plan import plan
from .reconcile import reconcile
from .scan_documents import scan_documents
from .TargetValidationError import TargetValidationError
from .VaultConfig import VaultConfig

__all__ = [
    "FilesystemError",
    "LinkLocation",
    "LinkOccurrence",
    "MaterializeResult",
    "MissingLinkPlan",
    "TargetValidationError",
    "VaultConfig",
    "aggregate_links",
    "apply",
    "extract_links",
    "index_existing",
    "materialize",
    "parse_wikilinks",
    "plan",
    "reconcile",
    "scan_documents",
]
