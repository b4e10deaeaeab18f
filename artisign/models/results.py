"""Matcher and orchestrator result models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class MatchKind(str, Enum):
    """Outcome of looking for a reusable signed artifact."""

    NO_CANDIDATE = "no_candidate"
    REUSABLE = "reusable"
    NOT_SIGNED = "not_signed"  # equal alternate exists, no signed counterpart
    INCONSISTENT = "inconsistent"


class SignOutcome(str, Enum):
    """What happened to one input artifact."""

    SIGNED = "signed"
    REUSED = "reused"
    SKIPPED = "skipped"


class MatchResult(BaseModel):
    """Result of :meth:`AlternateSourceMatcher.find_reusable`."""

    model_config = ConfigDict(frozen=True)

    kind: MatchKind
    source: Path
    candidates: list[Path] = Field(default_factory=list)
    equal_alternate: Path | None = None
    reusable: Path | None = None


class ArtifactResult(BaseModel):
    """The per-file record produced by the orchestrator."""

    model_config = ConfigDict(frozen=True)

    source: Path
    target: Path
    outcome: SignOutcome
    reused_from: Path | None = None
    warning: str | None = None


class SignReport(BaseModel):
    """Ordered results of a complete signing pass."""

    model_config = ConfigDict(frozen=True)

    results: list[ArtifactResult] = Field(default_factory=list)

    def _count(self, outcome: SignOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def signed(self) -> int:
        return self._count(SignOutcome.SIGNED)

    @property
    def reused(self) -> int:
        return self._count(SignOutcome.REUSED)

    @property
    def skipped(self) -> int:
        return self._count(SignOutcome.SKIPPED)

    @property
    def warnings(self) -> list[str]:
        return [r.warning for r in self.results if r.warning]
