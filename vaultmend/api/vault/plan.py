"""Plan phase of the two-phase reconciliation (UNO: single function)."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ._constants import PHASE_EXTRACT, PHASE_INDEX, PHASE_SCAN
from ._in_phase import _in_phase
from .aggregate_links import aggregate_links
from .index_existing import index_existing
from .MissingLinkPlan import MissingLinkPlan
from .reconcile import reconcile
from .scan_documents import scan_documents
from .VaultConfig import VaultConfig

logger = get_logger("vault.plan")


def plan(root: Path | str, vault_config: VaultConfig | None = None) -> MissingLinkPlan:
    """Find the link targets of a vault that have no document.

    Reads only. Phases run in order and the first failure stops the run.

    Raises:
        FilesystemError: Tagged with the phase that failed
    """
    cfg = vault_config or VaultConfig()
    # Path("") is the working directory, so the walkers get the root verbatim
    root_path = Path(root)

    with _in_phase(PHASE_SCAN):
        documents = scan_documents(root, cfg.extension, cfg.exclude_dirnames)
    with _in_phase(PHASE_EXTRACT):
        links = aggregate_links(documents)
    with _in_phase(PHASE_INDEX):
        existing = index_existing(root, cfg.extension, cfg.exclude_dirnames)
    missing = reconcile(links, existing)

    logger.info("Planned %s: %d documents, %d targets, %d missing", root_path, len(documents), len(links), len(missing))
    return MissingLinkPlan(
        root=root_path,
        extension=cfg.extension,
        documents=tuple(documents),
        links=links,
        existing=existing,
        missing=missing,
    )
