# src/elementary/cli/main.py
import typer

from elementary.cli.bosons import bosons_app
from elementary.cli.constants import constants_app
from elementary.core.logging import configure_logging

app = typer.Typer(
    help="elementary: gauge boson catalog CLI",
    context_settings={"help_option_names": ["-h", "--help"]}
)

# Add sub-commands
app.add_typer(bosons_app, name="bosons")
app.add_typer(constants_app, name="constants")

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", help="Show version and exit")
):
    """
    Browse gauge bosons and the constants behind their masses.

    Use 'elementary COMMAND --help' to see options for specific commands.
    """
    if version:
        from elementary import __version__
        typer.echo(f"elementary version {__version__}")
        raise typer.Exit()

    configure_logging("DEBUG" if verbose else None)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

if __name__ == "__main__":
    app()
