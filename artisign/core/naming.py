"""Artifact name classification.

Two questions are answered for a filename:

* its *base artifact name* — the family identity with version, classifier
  and extension stripped (``mylib-1.2.3-sources.jar`` -> ``mylib``);
* its *matching suffix* — the longest configured ending it carries
  (``-sources.jar`` beats ``.jar``).

Suffixes come from an injected :class:`SuffixTable`; there is no built-in
default set.
"""

from __future__ import annotations

from collections.abc import Iterable

from artisign.models.suffixes import ArtifactSuffix


class SuffixConfigError(ValueError):
    """Raised when the suffix table is ambiguous (duplicate patterns)."""


def base_artifact_name(name: str) -> str:
    """Strip version, classifier and extension decoration from ``name``.

    Cuts at the earliest ``-`` or ``_``; without either, cuts at the last
    ``.``; without that, returns ``name`` unchanged.
    """
    cuts = [i for i in (name.find("-"), name.find("_")) if i >= 0]
    if cuts:
        return name[: min(cuts)]
    dot = name.rfind(".")
    if dot >= 0:
        return name[:dot]
    return name


class SuffixTable:
    """Ordered, validated set of recognised artifact suffixes.

    Two distinct patterns can only tie on length when both match the same
    name if they are identical strings, so duplicates are rejected up front.

    Parameters
    ----------
    suffixes:
        The configured ``(classifier, extension)`` pairs.
    """

    def __init__(self, suffixes: Iterable[ArtifactSuffix]) -> None:
        self._suffixes: tuple[ArtifactSuffix, ...] = tuple(suffixes)
        seen: set[str] = set()
        for suffix in self._suffixes:
            pattern = suffix.pattern
            if pattern in seen:
                raise SuffixConfigError(
                    f"Suffix pattern {pattern!r} is configured more than once"
                )
            seen.add(pattern)

    @classmethod
    def parse(cls, specs: Iterable[str]) -> SuffixTable:
        """Build a table from ``"classifier:ext"`` / ``"ext"`` strings."""
        return cls(ArtifactSuffix.parse(s) for s in specs)

    @property
    def patterns(self) -> list[str]:
        return [s.pattern for s in self._suffixes]

    def __len__(self) -> int:
        return len(self._suffixes)

    def __iter__(self):
        return iter(self._suffixes)

    def matching_suffix(self, name: str) -> str | None:
        """Return the longest configured pattern ``name`` ends with, or None."""
        best: str | None = None
        for pattern in self.patterns:
            if name.endswith(pattern) and (best is None or len(pattern) > len(best)):
                best = pattern
        return best
