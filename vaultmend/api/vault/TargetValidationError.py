"""Validation error for link targets that would escape the vault."""

from ._constants import PHASE_VALIDATE


class TargetValidationError(ValueError):
    """Raised when one or more link targets resolve outside the vault root."""

    def __init__(self, targets: list[str]):
        if isinstance(targets, str):
            targets = [targets]
        self.targets = targets
        self.phase = PHASE_VALIDATE
        message = "Refusing to create files outside the vault: " + ", ".join(repr(t) for t in targets)
        super().__init__(message)
