"""Per-run task configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from artisign.models.suffixes import ArtifactSuffix


class SignTaskConfig(BaseModel):
    """The invocation context for one signing pass.

    Immutable for the duration of a run.  ``suffixes`` has no default
    entries; the embedding build decides which endings are recognised.
    """

    model_config = ConfigDict(frozen=True)

    output_dir: Path
    alternate_source_dir: Path | None = None
    alternate_target_dir: Path | None = None
    fail_on_inconsistency: bool = False
    suffixes: list[ArtifactSuffix] = Field(default_factory=list)
