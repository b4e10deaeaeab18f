"""Content digests for artifact equality checks.

Only the bytes matter: two files with the same content hash the same
regardless of path, name, or metadata.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from artisign.core.fileops import ArtifactIOError

_CHUNK_SIZE = 1024 * 1024


class ArtifactReadError(ArtifactIOError):
    """Raised when an artifact cannot be read for checksumming."""

    action = "read"


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def file_checksum(path: Path) -> str:
    """SHA-256 hex digest of a file, read in chunks.

    Raises
    ------
    ArtifactReadError
        If the file cannot be opened or read.
    """
    digest = hashlib.sha256()
    try:
        with open(path, "rb") as fh:
            for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as exc:
        raise ArtifactReadError(path, exc) from exc
    return digest.hexdigest()
