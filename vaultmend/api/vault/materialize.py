"""Materializer: create empty documents for missing link targets."""

from collections.abc import Iterable
from pathlib import Path

from ...utils.get_logger import get_logger
from ._constants import DOCUMENT_EXTENSION
from .FilesystemError import FilesystemError
from .MaterializeResult import MaterializeResult
from .TargetValidationError import TargetValidationError
from .validate_target import validate_target

logger = get_logger("vault.materialize")


def resolve_targets(root: Path | str, targets: Iterable[str], extension: str = DOCUMENT_EXTENSION) -> dict[str, Path]:
    """Map every target to the file it would create.

    Raises:
        TargetValidationError: If any target escapes the root; nothing is resolved
    """
    root_path = Path(root)
    resolved: dict[str, Path] = {}
    rejected: list[str] = []
    for target in targets:
        path = validate_target(root_path, target, extension)
        if path is None:
            rejected.append(target)
        else:
            resolved[target] = path
    if rejected:
        logger.error("Rejected %d link targets outside %s: %s", len(rejected), root_path, rejected)
        raise TargetValidationError(rejected)
    return resolved


def materialize(root: Path | str, targets: Iterable[str], extension: str = DOCUMENT_EXTENSION) -> MaterializeResult:
    """Create an empty document for every target, creating parent directories.

    Existing files are never truncated or touched, so a second run is a no-op.
    Every target is validated before the first file is created.

    Raises:
        TargetValidationError: If any target escapes the root
        FilesystemError: On the first directory or file that cannot be created
    """
    root_path = Path(root)
    result = MaterializeResult()
    for target, path in resolve_targets(root_path, targets, extension).items():
        relative = path.relative_to(root_path).as_posix()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Cannot create directory %s: %s", path.parent, exc)
            raise FilesystemError(f"Cannot create directory {path.parent}: {exc.strerror or exc}", path.parent) from exc
        try:
            with path.open("x", encoding="utf-8"):
                pass
        except FileExistsError:
            logger.debug("Skipping existing %s", path)
            result.skipped.append(relative)
            continue
        except OSError as exc:
            logger.error("Cannot create %s: %s", path, exc)
            raise FilesystemError(f"Cannot create {path}: {exc.strerror or exc}", path) from exc
        logger.info("Created %s for [[%s]]", path, target)
        result.created.append(relative)
    return result
