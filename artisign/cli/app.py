"""Main Typer application — imports and registers all CLI commands.

Entry point: ``artisign`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from artisign.cli.commands.classify import classify_cmd
from artisign.cli.commands.sign import sign_cmd
from artisign.config import SignerSettings

app = typer.Typer(
    name="artisign",
    help="Artisign: sign release artifacts, reusing signatures of identical builds.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    try:
        log_level = SignerSettings().log_level
    except ValueError as exc:
        Console().print(f"[bold red]Invalid configuration:[/bold red] {exc}")
        raise typer.Exit(code=2)
    level = "DEBUG" if verbose else log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# Register subcommands
app.command(name="sign", help="Run a reuse-or-sign pass over a directory.")(sign_cmd)
app.command(name="classify", help="Show base names and suffixes of filenames.")(classify_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
