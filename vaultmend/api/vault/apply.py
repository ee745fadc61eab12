"""Apply phase of the two-phase reconciliation (UNO: single function)."""

from ._constants import PHASE_CREATE
from ._in_phase import _in_phase
from .materialize import materialize
from .MaterializeResult import MaterializeResult
from .MissingLinkPlan import MissingLinkPlan


def apply(missing_plan: MissingLinkPlan) -> MaterializeResult:
    """Create a placeholder document for every missing target of the plan.

    Raises:
        TargetValidationError: If any target escapes the vault; nothing is created
        FilesystemError: Tagged with the create phase
    """
    with _in_phase(PHASE_CREATE):
        return materialize(missing_plan.root, missing_plan.missing.keys(), missing_plan.extension)
