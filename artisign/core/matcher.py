"""Alternate-source matching for signed-artifact reuse.

A source artifact may be reused from a previous build location when a file
in the alternate source directory has the same base artifact name, the same
suffix and byte-identical content, *and* that file's signed counterpart
exists in the alternate target directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from artisign.core.hasher import ArtifactReadError, file_checksum
from artisign.core.naming import SuffixTable, base_artifact_name
from artisign.models.results import MatchKind, MatchResult

logger = logging.getLogger(__name__)


class AlternateSourceMatcher:
    """Finds reusable signed artifacts in a previous build location.

    Parameters
    ----------
    suffixes:
        The suffix table used to classify filenames.
    """

    def __init__(self, suffixes: SuffixTable) -> None:
        self._suffixes = suffixes

    def candidates(self, source: Path, alternate_source_dir: Path) -> list[Path]:
        """Files directly in ``alternate_source_dir`` sharing base and suffix.

        Returned in directory listing order.  An unrecognised source name or
        a missing directory yields no candidates.
        """
        suffix = self._suffixes.matching_suffix(source.name)
        if suffix is None or not alternate_source_dir.is_dir():
            return []
        base = base_artifact_name(source.name)
        try:
            entries = list(alternate_source_dir.iterdir())
        except OSError as exc:
            raise ArtifactReadError(alternate_source_dir, exc) from exc
        return [
            entry
            for entry in entries
            if entry.is_file()
            and base_artifact_name(entry.name) == base
            and self._suffixes.matching_suffix(entry.name) == suffix
        ]

    def find_reusable(
        self,
        source: Path,
        alternate_source_dir: Path,
        alternate_target_dir: Path | None,
    ) -> MatchResult:
        """Look for a signed artifact that can stand in for ``source``."""
        candidates = self.candidates(source, alternate_source_dir)
        if not candidates:
            return MatchResult(kind=MatchKind.NO_CANDIDATE, source=source)

        source_checksum = file_checksum(source)
        equal = next(
            (c for c in candidates if file_checksum(c) == source_checksum),
            None,
        )
        if equal is None:
            return MatchResult(
                kind=MatchKind.INCONSISTENT, source=source, candidates=candidates
            )

        logger.debug("%s has identical alternate %s", source.name, equal)
        if alternate_target_dir is not None:
            signed = alternate_target_dir / equal.name
            if signed.is_file():
                return MatchResult(
                    kind=MatchKind.REUSABLE,
                    source=source,
                    candidates=candidates,
                    equal_alternate=equal,
                    reusable=signed,
                )
        return MatchResult(
            kind=MatchKind.NOT_SIGNED,
            source=source,
            candidates=candidates,
            equal_alternate=equal,
        )
