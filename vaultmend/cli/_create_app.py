"""Create the main Typer CLI app."""

import typer

from vaultmend.cli.vault import vault


def _run_interactive_or_fail() -> None:
    from vaultmend.api.config.VaultmendConfig import VaultmendConfig
    from vaultmend.cli.interactive import run_interactive
    from vaultmend.utils.get_logger import ensure_logging

    try:
        config = VaultmendConfig.load()
    except ValueError as e:
        typer.echo(f"Error loading configuration: {e}")
        raise typer.Exit(1) from e
    warning = ensure_logging()
    if warning:
        typer.echo(f"Warning: {warning}", err=True)
    raise typer.Exit(run_interactive(config.vault))


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Find wiki-links with no note in an Obsidian vault and create the notes",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(vault(), name="vault")

    @app.command(name="interactive")
    def interactive_cmd() -> None:
        """Prompt for a vault, list missing notes and create them on confirmation."""
        _run_interactive_or_fail()

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            _run_interactive_or_fail()

    return app
