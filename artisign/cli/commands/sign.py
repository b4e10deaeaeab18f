"""``artisign sign INPUT_DIR`` — run one reuse-or-sign pass.

Collects the out-of-date artifacts in INPUT_DIR (or all of them with
``--all``), reuses signed counterparts from a previous build location where
possible, and signs the rest through the remote service.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from artisign.config import SignerSettings
from artisign.core.fileops import ArtifactIOError, ensure_directory
from artisign.core.naming import SuffixConfigError
from artisign.core.orchestrator import InconsistentArtifactError, SignOrchestrator
from artisign.core.signing_client import SigningClient, SigningServiceError
from artisign.core.staleness import collect_out_of_date
from artisign.models.config import SignTaskConfig
from artisign.models.results import SignOutcome, SignReport
from artisign.models.suffixes import ArtifactSuffix

console = Console()
logger = logging.getLogger(__name__)

_OUTCOME_STYLES: dict[SignOutcome, str] = {
    SignOutcome.SIGNED: "[green]SIGNED[/green]",
    SignOutcome.REUSED: "[cyan]REUSED[/cyan]",
    SignOutcome.SKIPPED: "[yellow]SKIPPED[/yellow]",
}


def _render_report(report: SignReport) -> Table:
    table = Table(title="Signing Pass")
    table.add_column("Artifact", style="bold")
    table.add_column("Outcome", justify="center")
    table.add_column("Reused From", style="dim")
    for result in report.results:
        table.add_row(
            result.source.name,
            _OUTCOME_STYLES[result.outcome],
            str(result.reused_from) if result.reused_from else "",
        )
    return table


def sign_cmd(
    input_dir: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        help="Directory holding the artifacts to sign.",
    ),
    output_dir: Path = typer.Option(
        ..., "--output-dir", "-o", help="Directory the signed artifacts are written to."
    ),
    alternate_source: Path | None = typer.Option(
        None,
        "--alternate-source",
        help="Unsigned artifacts of a previous build, used to detect identical content.",
    ),
    alternate_target: Path | None = typer.Option(
        None,
        "--alternate-target",
        help="Signed artifacts of that previous build, reused when content matches.",
    ),
    fail_on_inconsistency: bool | None = typer.Option(
        None,
        "--fail-on-inconsistency/--warn-on-inconsistency",
        help="Abort when an alternate artifact has the same name but different content.",
    ),
    suffix: list[str] | None = typer.Option(
        None,
        "--suffix",
        "-s",
        help="Recognised suffix as 'classifier:ext' or 'ext'. Repeatable.",
    ),
    skip_signing: bool = typer.Option(
        False, "--skip-signing", help="Copy artifacts instead of signing them."
    ),
    signing_url: str | None = typer.Option(
        None, "--signing-url", help="Override the signing service URL."
    ),
    process_all: bool = typer.Option(
        False, "--all", help="Process every artifact, not only out-of-date ones."
    ),
) -> None:
    """Sign (or reuse signatures for) the artifacts in INPUT_DIR."""
    overrides: dict = {}
    if signing_url:
        overrides["signing_url"] = signing_url
    if skip_signing:
        overrides["skip"] = True
    try:
        settings = SignerSettings(**overrides)
        suffixes = [ArtifactSuffix.parse(s) for s in (suffix or settings.suffixes)]
        task = SignTaskConfig(
            output_dir=output_dir,
            alternate_source_dir=alternate_source,
            alternate_target_dir=alternate_target,
            fail_on_inconsistency=(
                settings.fail_on_inconsistency
                if fail_on_inconsistency is None
                else fail_on_inconsistency
            ),
            suffixes=suffixes,
        )
    except ValueError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {exc}")
        raise typer.Exit(code=2)

    try:
        ensure_directory(output_dir)
        sources = collect_out_of_date(input_dir, output_dir, include_all=process_all)
    except ArtifactIOError as exc:
        console.print(f"[bold red]Signing pass aborted:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if not sources:
        console.print("[dim]Nothing to sign: all artifacts are up to date.[/dim]")
        return

    try:
        with SigningClient(settings) as client:
            orchestrator = SignOrchestrator(task, client)
            report = orchestrator.run(sources)
    except SuffixConfigError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {exc}")
        raise typer.Exit(code=2)
    except (
        InconsistentArtifactError,
        SigningServiceError,
        ArtifactIOError,
    ) as exc:
        logger.debug("Signing pass aborted", exc_info=True)
        console.print(f"[bold red]Signing pass aborted:[/bold red] {exc}")
        raise typer.Exit(code=1)

    console.print(_render_report(report))
    for warning in report.warnings:
        console.print(f"[yellow]warning:[/yellow] {warning}")
    console.print(
        f"[bold green]Done.[/bold green] {report.signed} signed, "
        f"{report.reused} reused, {report.skipped} skipped."
    )
