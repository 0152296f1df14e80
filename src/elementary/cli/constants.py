# elementary/cli/constants.py
import json
from pathlib import Path

import typer
from rich import print

from elementary.core.constants import CONSTANTS_DICT, export_to_yaml

constants_app = typer.Typer(help="View physical constants used for mass derivation.")

@constants_app.command("list")
def list_constants():
    """List all registry constants (names and descriptions)."""
    for name, const in CONSTANTS_DICT.items():
        print(f"[bold cyan]{name}[/bold cyan]: {const.description}")

@constants_app.command("show")
def show_constant(
    name: str = typer.Argument(..., help="Constant name"),
    format: str = typer.Option("plain", help="Output format: plain|json|md")
):
    """Show all metadata for a constant."""
    const = CONSTANTS_DICT.get(name)
    if not const:
        print(f"[red]Constant not found:[/red] {name}")
        raise typer.Exit(1)
    if format == "json":
        data = const.model_dump(mode="json", exclude={"symbol", "eval_expr"})
        typer.echo(json.dumps(data, indent=2))
    elif format == "md":
        typer.echo(
            f"## {const.name}\n\n"
            f"{const.description}\n\n"
            f"- **Symbol:** `{const.symbol}`\n"
            f"- **Units:** {const.units}\n"
            f"- **Category:** {const.category.value}\n"
            f"- **Value:** {const.value}\n"
        )
    else:
        print(str(const))

@constants_app.command("export")
def export_constants(
    path: Path = typer.Argument(Path("constants.yaml"), help="Destination YAML file")
):
    """Export the registry to YAML."""
    export_to_yaml(str(path))
    print(f"[green]Exported {len(CONSTANTS_DICT)} constants to[/green] {path}")
