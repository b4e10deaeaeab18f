"""Reuse-or-sign orchestrator — the per-file decision procedure.

For every out-of-date input the orchestrator either copies a previously
signed, content-identical artifact from the alternate target directory, or
hands the file to the :class:`SigningClient`.  Any fatal error aborts the
whole pass; there is no per-file isolation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from artisign.core.fileops import copy_bytes, ensure_parent
from artisign.core.matcher import AlternateSourceMatcher
from artisign.core.naming import SuffixTable
from artisign.core.signing_client import SigningClient
from artisign.models.config import SignTaskConfig
from artisign.models.results import (
    ArtifactResult,
    MatchKind,
    MatchResult,
    SignOutcome,
    SignReport,
)

logger = logging.getLogger(__name__)


class InconsistentArtifactError(RuntimeError):
    """Raised when an alternate artifact has the same name shape but different content."""

    def __init__(self, source: Path, candidates: list[Path]) -> None:
        super().__init__(_inconsistency_message(source, candidates))
        self.source = source
        self.candidates = candidates


def _inconsistency_message(source: Path, candidates: list[Path]) -> str:
    names = ", ".join(str(c) for c in candidates)
    return f"{source} matches {names}, but content is unequal"


class SignOrchestrator:
    """Runs one signing pass over a set of out-of-date artifacts.

    Parameters
    ----------
    config:
        The task invocation context.
    signing_client:
        Client used for every file that cannot be reused.
    """

    def __init__(self, config: SignTaskConfig, signing_client: SigningClient) -> None:
        self.config = config
        self.signing_client = signing_client
        self.matcher = AlternateSourceMatcher(SuffixTable(config.suffixes))

    def target_for(self, source: Path) -> Path:
        return self.config.output_dir / source.name

    def run(self, sources: Iterable[Path]) -> SignReport:
        """Process ``sources`` in order, stopping at the first fatal error."""
        results = [self.process(Path(source)) for source in sources]
        report = SignReport(results=results)
        logger.info(
            "Signing pass complete: %d signed, %d reused, %d skipped",
            report.signed,
            report.reused,
            report.skipped,
        )
        return report

    def process(self, source: Path) -> ArtifactResult:
        """Reuse or sign a single artifact."""
        target = self.target_for(source)
        ensure_parent(target)

        warning: str | None = None
        # Skip mode copies every source verbatim, reuse included.
        if self.config.alternate_source_dir is not None and not self.signing_client.skip:
            match = self.matcher.find_reusable(
                source,
                self.config.alternate_source_dir,
                self.config.alternate_target_dir,
            )
            if match.kind == MatchKind.INCONSISTENT:
                warning = self._handle_inconsistency(match)
            elif match.kind == MatchKind.REUSABLE and match.reusable is not None:
                copy_bytes(match.reusable, target)
                logger.info("Reusing %s for %s", match.reusable, source.name)
                return ArtifactResult(
                    source=source,
                    target=target,
                    outcome=SignOutcome.REUSED,
                    reused_from=match.reusable,
                )

        outcome = self.signing_client.sign(source, target)
        return ArtifactResult(
            source=source, target=target, outcome=outcome, warning=warning
        )

    def _handle_inconsistency(self, match: MatchResult) -> str:
        if self.config.fail_on_inconsistency:
            raise InconsistentArtifactError(match.source, list(match.candidates))
        message = _inconsistency_message(match.source, list(match.candidates))
        logger.warning("%s; signing it again", message)
        return message
