"""Link target validation (UNO: single function)."""

import os
import re
from pathlib import Path, PurePosixPath, PureWindowsPath

_SEPARATORS = re.compile(r"[\\/]")


def validate_target(root: Path, target: str, extension: str) -> Path | None:
    """Resolve a link target to the file it would create under root.

    Separators in the target denote sub-directories of the root. Targets
    anchored for the host OS (absolute, or drive-qualified on Windows) and
    ``..`` segments are refused.

    Returns:
        The target file path, or None if the target would escape the root
    """
    if "\x00" in target:
        return None
    pure = PureWindowsPath(target) if os.name == "nt" else PurePosixPath(target)
    if pure.anchor:
        return None
    if any(segment == ".." for segment in _SEPARATORS.split(target)):
        return None

    candidate = root / f"{target}{extension}"
    resolved_root = root.resolve()
    # Symlinked directories inside the vault can still point elsewhere
    if not candidate.resolve().is_relative_to(resolved_root):
        return None
    return candidate
