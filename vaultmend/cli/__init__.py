"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer runs in standalone mode: usage errors exit with 2, aborted
    prompts with 1, and commands set their own exit codes.
    """
    import typer

    from vaultmend.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from vaultmend.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"vaultmend {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        app(argv, prog_name="vaultmend")
    except SystemExit as e:
        if e.code is None or isinstance(e.code, int):
            return e.code or 0
        typer.echo(str(e.code), err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
