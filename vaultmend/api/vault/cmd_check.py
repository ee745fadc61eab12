"""Vault check API command.

CLI: vaultmend vault check [root]
"""

from collections.abc import Iterator

from ...utils.get_logger import ensure_logging, get_logger
from .._output_schemas.vault import VaultCheckOutput
from ..StageResult import StageResult

logger = get_logger("vault.check")


def cmd_check(root: str | None = None) -> StageResult:
    """Report link targets that have no document in the vault.

    Args:
        root: Vault root directory. If None, use vault.base_dir from the configuration.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultmendConfig import VaultmendConfig
        from ._plan_to_output import _plan_to_output
        from ._resolve_root import _resolve_root
        from .FilesystemError import FilesystemError
        from .plan import plan

        warnings: list[str] = []

        def fail(message: str, vault_root: str = "") -> None:
            logger.error(message)
            result_obj.output = VaultCheckOutput(
                errors=[message],
                warnings=warnings,
                root=vault_root,
                documents_scanned=0,
                links_found=0,
                missing_count=0,
                missing=[],
                duplicates={},
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Vault check failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = VaultmendConfig.load()
            log_warning = ensure_logging()
            if log_warning:
                warnings.append(log_warning)
            vault_root = _resolve_root(root, config)
        except ValueError as e:
            fail(str(e))
            return

        yield (0.3, "Scanning vault for links...")
        try:
            missing_plan = plan(vault_root, config.vault)
        except FilesystemError as e:
            fail(f"Error {e.phase}: {e}", vault_root)
            return

        yield (0.9, "Summarizing missing links...")
        duplicates = missing_plan.duplicates
        warnings.extend(
            f"Basename '{name}' is shared by {len(paths)} documents: {', '.join(paths)}"
            for name, paths in duplicates.items()
        )
        missing_count = len(missing_plan.missing)
        result_obj.output = VaultCheckOutput(
            errors=[],
            warnings=warnings,
            root=str(missing_plan.root),
            documents_scanned=len(missing_plan.documents),
            links_found=len(missing_plan.links),
            missing_count=missing_count,
            missing=_plan_to_output(missing_plan),
            duplicates={name: list(paths) for name, paths in duplicates.items()},
            success=True,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Found {missing_count} missing files in {len(missing_plan.documents)} documents"
            if missing_count
            else "No missing files found."
        )
        result_obj.success = True
        yield (1.0, "Complete")

    announce = f"Checking vault links{f' ({root})' if root else ''}..."
    return StageResult(
        announce=announce,
        progress_callback=do_work,
    )
