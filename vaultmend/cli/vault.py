"""Vault Typer app factory."""

import typer

from vaultmend.api.vault.cmd_check import cmd_check
from vaultmend.api.vault.cmd_create import cmd_create
from vaultmend.cli._handle_stage_result import display_format, handle_stage_result


def vault() -> typer.Typer:
    """Create and configure the vault Typer app."""
    app = typer.Typer(
        name="vault",
        help="Vault link reconciliation",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        root: str | None = typer.Argument(None, help="Vault root (default: vault.base_dir)"),
    ) -> None:
        """List link targets that have no document."""
        handle_stage_result(cmd_check, display_format(ctx))(root)

    @app.command(name="create")
    def create_cmd(
        ctx: typer.Context,
        root: str | None = typer.Argument(None, help="Vault root (default: vault.base_dir)"),
        dry_run: bool = typer.Option(False, "--dry-run", "-n", help="List the files without creating them"),
    ) -> None:
        """Create an empty document for every missing link target."""
        handle_stage_result(cmd_create, display_format(ctx))(root, dry_run=dry_run)

    return app
