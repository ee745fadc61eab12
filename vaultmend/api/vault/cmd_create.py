"""Vault create API command.

CLI: vaultmend vault create [root] [--dry-run]
"""

from collections.abc import Iterator

from ...utils.get_logger import ensure_logging, get_logger
from .._output_schemas.vault import VaultCreateOutput
from ..StageResult import StageResult

logger = get_logger("vault.create")


def cmd_create(root: str | None = None, dry_run: bool = False) -> StageResult:
    """Create an empty document for every link target that has none.

    Args:
        root: Vault root directory. If None, use vault.base_dir from the configuration.
        dry_run: Validate and list the documents without creating them.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultmendConfig import VaultmendConfig
        from ._resolve_root import _resolve_root
        from .apply import apply
        from .FilesystemError import FilesystemError
        from .materialize import resolve_targets
        from .plan import plan
        from .TargetValidationError import TargetValidationError

        warnings: list[str] = []

        def fail(message: str, vault_root: str = "", missing_count: int = 0) -> None:
            logger.error(message)
            result_obj.output = VaultCreateOutput(
                errors=[message],
                warnings=warnings,
                root=vault_root,
                missing_count=missing_count,
                created=[],
                skipped=[],
                dry_run=dry_run,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Vault create failed: {message}"
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

        missing_count = len(missing_plan.missing)
        yield (0.6, f"Creating {missing_count} missing files..." if not dry_run else "Validating missing files...")
        try:
            if dry_run:
                targets = resolve_targets(missing_plan.root, missing_plan.missing.keys(), missing_plan.extension)
                relative = {path: path.relative_to(missing_plan.root).as_posix() for path in targets.values()}
                created = [rel for path, rel in relative.items() if not path.exists()]
                skipped = [rel for path, rel in relative.items() if path.exists()]
            else:
                outcome = apply(missing_plan)
                created, skipped = outcome.created, outcome.skipped
        except (FilesystemError, TargetValidationError) as e:
            fail(f"Error {e.phase}: {e}", vault_root, missing_count)
            return

        result_obj.output = VaultCreateOutput(
            errors=[],
            warnings=warnings,
            root=str(missing_plan.root),
            missing_count=missing_count,
            created=created,
            skipped=skipped,
            dry_run=dry_run,
            success=True,
        ).model_dump(mode="python")
        if not missing_count:
            result_obj.result = "No missing files found."
        elif dry_run:
            result_obj.result = f"Would create {len(created)} missing files"
        else:
            result_obj.result = "Missing files created."
        result_obj.success = True
        yield (1.0, "Complete")

    announce = f"Creating missing vault files{f' ({root})' if root else ''}..."
    return StageResult(
        announce=announce,
        progress_callback=do_work,
    )
