"""Out-of-date input discovery for incremental signing passes."""

from __future__ import annotations

from pathlib import Path

from artisign.core.hasher import ArtifactReadError


def is_out_of_date(source: Path, target: Path) -> bool:
    """True if ``target`` is missing or older than ``source``."""
    if not target.exists():
        return True
    return target.stat().st_mtime < source.stat().st_mtime


def collect_out_of_date(
    input_dir: Path, output_dir: Path, *, include_all: bool = False
) -> list[Path]:
    """Regular files directly in ``input_dir`` whose output needs refreshing.

    With ``include_all`` every regular file is returned, fresh or not.
    Sorted by name so passes are reproducible.

    Raises
    ------
    ArtifactReadError
        If ``input_dir`` cannot be listed or an input cannot be inspected.
    """
    try:
        return sorted(
            (
                entry
                for entry in input_dir.iterdir()
                if entry.is_file()
                and (include_all or is_out_of_date(entry, output_dir / entry.name))
            ),
            key=lambda p: p.name,
        )
    except OSError as exc:
        raise ArtifactReadError(input_dir, exc) from exc
