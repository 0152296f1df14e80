# elementary/cli/bosons.py
import json
import math

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from elementary.catalog import CATALOG, get_info
from elementary.core.logging import logger

console = Console()
bosons_app = typer.Typer(help="Browse the canonical boson catalog.")

@bosons_app.command("list")
def list_bosons():
    """List catalog bosons with their key quantum numbers."""
    table = Table(title="Gauge Bosons")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Mass (eV)", justify="right")
    table.add_column("Charge")
    table.add_column("Spin")
    table.add_column("Interactions", style="green")
    table.add_column("Status", style="dim")

    for info in CATALOG:
        b = info.boson
        table.add_row(
            info.name,
            b.type.name,
            f"{b.natural_mass.electron_volts:.6g}",
            b.electric_charge.expression,
            b.spin.expression,
            ", ".join(b.interaction_names()),
            info.status.value,
        )
    console.print(table)
    logger.debug(f"Listed {len(CATALOG)} bosons")

@bosons_app.command("show")
def show_boson(
    name: str = typer.Argument(..., help="Boson name (case-insensitive)"),
    format: str = typer.Option("plain", help="Output format: plain|json|md")
):
    """Show all quantum numbers for a boson."""
    try:
        info = get_info(name)
    except KeyError:
        print(f"[red]Boson not found:[/red] {name}")
        raise typer.Exit(1)
    data = info.boson.summary()
    if format == "json":
        # JSON has no infinity; a stable lifetime is written as null
        if not math.isfinite(data["lifetime_s"]):
            data["lifetime_s"] = None
        typer.echo(json.dumps({"name": info.name, **data}, indent=2, allow_nan=False))
    elif format == "md":
        lines = [f"## {info.name} ({info.symbol})", "", info.description, ""]
        lines += [f"- **{key}:** {value}" for key, value in data.items()]
        if info.notes:
            lines += ["", f"> {info.notes}"]
        typer.echo("\n".join(lines))
    else:
        print(f"[bold cyan]{info.name}[/bold cyan] ({info.symbol}): {info.description}")
        for key, value in data.items():
            print(f"  {key}: {value}")
