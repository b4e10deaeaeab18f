"""``artisign classify NAME...`` — show how filenames are classified."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from artisign.config import SignerSettings
from artisign.core.naming import SuffixTable, base_artifact_name

console = Console()


def classify_cmd(
    names: list[str] = typer.Argument(..., help="Filenames to classify."),
    suffix: list[str] | None = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Recognised suffix as 'classifier:ext' or 'ext'. Repeatable.",
    ),
) -> None:
    """Print the base artifact name and matching suffix of each NAME."""
    try:
        table_cfg = SuffixTable.parse(suffix or SignerSettings().suffixes)
    except ValueError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {exc}")
        raise typer.Exit(code=2)

    table = Table(title="Artifact Names")
    table.add_column("Name", style="cyan")
    table.add_column("Base Name", style="green")
    table.add_column("Suffix")
    for name in names:
        matched = table_cfg.matching_suffix(name)
        table.add_row(name, base_artifact_name(name), matched or "[dim]none[/dim]")
    console.print(table)
