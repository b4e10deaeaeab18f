"""Artisign data models — all Pydantic v2, all frozen (immutable)."""

from artisign.models.config import SignTaskConfig
from artisign.models.results import (
    ArtifactResult,
    MatchKind,
    MatchResult,
    SignOutcome,
    SignReport,
)
from artisign.models.suffixes import ArtifactSuffix

__all__ = [
    # suffixes
    "ArtifactSuffix",
    # config
    "SignTaskConfig",
    # results
    "MatchKind",
    "MatchResult",
    "SignOutcome",
    "ArtifactResult",
    "SignReport",
]
