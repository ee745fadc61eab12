"""Interactive driver: prompt for a vault, report missing links, create on confirmation."""

import typer

from vaultmend.api.vault.FilesystemError import FilesystemError
from vaultmend.api.vault.MissingLinkPlan import MissingLinkPlan
from vaultmend.api.vault.TargetValidationError import TargetValidationError
from vaultmend.api.vault.VaultConfig import VaultConfig
from vaultmend.utils.get_logger import get_logger

ROOT_PROMPT = "Enter the root directory of the Obsidian vault"
CONFIRM_PROMPT = "Do you want to create these missing files? (y/n)"

logger = get_logger("cli.interactive")


def _first_token(line: str) -> str:
    tokens = line.split()
    return tokens[0] if tokens else ""


def _print_missing(missing_plan: MissingLinkPlan) -> None:
    typer.echo("Missing files:")
    for target, locations in missing_plan.missing.items():
        typer.echo(f"{missing_plan.target_file(target)} is referenced in:")
        for location in locations:
            typer.echo(f"  - {location.describe()}")


def run_interactive(vault_config: VaultConfig | None = None) -> int:
    """Run one prompt-then-act session on stdin/stdout.

    Returns:
        Process exit code: 0 when the run completed, 1 when a phase failed
    """
    from vaultmend.api.vault.apply import apply
    from vaultmend.api.vault.plan import plan

    root = _first_token(typer.prompt(ROOT_PROMPT, default="", show_default=False))
    logger.info("Interactive run on %r", root)

    try:
        missing_plan = plan(root, vault_config)
    except FilesystemError as e:
        logger.error("Interactive run failed while %s: %s", e.phase, e)
        typer.echo(f"Error {e.phase}: {e}")
        return 1

    if not missing_plan.missing:
        typer.echo("No missing files found.")
        return 0

    _print_missing(missing_plan)
    answer = _first_token(typer.prompt(CONFIRM_PROMPT, default="", show_default=False))
    if answer.lower() != "y":
        typer.echo("No files were created.")
        return 0

    try:
        apply(missing_plan)
    except (FilesystemError, TargetValidationError) as e:
        logger.error("Interactive run failed while %s: %s", e.phase, e)
        typer.echo(f"Error {e.phase}: {e}")
        return 1

    typer.echo("Missing files created.")
    return 0
