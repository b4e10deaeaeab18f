"""Filesystem helpers shared by the reuse, signing and skip-signing paths."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class ArtifactIOError(RuntimeError):
    """Raised when an artifact file cannot be read or written.

    Always names the offending path; the underlying ``OSError`` is chained.
    """

    action = "access"

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to {self.action} {path}: {cause}")
        self.path = Path(path)


class ArtifactCopyError(ArtifactIOError):
    """Raised when artifact bytes cannot be copied to their target."""

    action = "copy"


class ArtifactWriteError(ArtifactIOError):
    """Raised when a signed artifact cannot be written to its target."""

    action = "write"


def ensure_directory(path: Path) -> None:
    """Create ``path`` and its parents if missing.  Idempotent.

    Any ``OSError`` is re-raised as :class:`ArtifactWriteError` naming the
    directory.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ArtifactWriteError(path, exc) from exc


def ensure_parent(target: Path) -> None:
    """Create the target's parent directory if missing.  Idempotent."""
    ensure_directory(target.parent)


def discard(path: Path) -> None:
    """Remove a partially written target.  Failures are logged, not raised."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.debug("Could not remove partial artifact %s: %s", path, exc)


def copy_bytes(source: Path, target: Path) -> int:
    """Copy ``source`` to ``target`` byte-for-byte and return the size.

    Any ``OSError`` is re-raised as :class:`ArtifactCopyError` naming the
    source path.
    """
    try:
        shutil.copyfile(source, target)
        return target.stat().st_size
    except OSError as exc:
        raise ArtifactCopyError(source, exc) from exc
