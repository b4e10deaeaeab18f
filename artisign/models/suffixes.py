"""Artifact suffix model — a (classifier, extension) pair."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class ArtifactSuffix(BaseModel):
    """A recognised artifact ending such as ``.jar`` or ``-sources.jar``.

    The classifier is optional; the extension is given without its dot.
    """

    model_config = ConfigDict(frozen=True)

    classifier: str | None = None
    extension: str

    @field_validator("extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("extension must not be empty")
        return value

    @field_validator("classifier")
    @classmethod
    def _blank_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def pattern(self) -> str:
        """The filename ending this suffix matches."""
        if self.classifier is None:
            return f".{self.extension}"
        return f"-{self.classifier}.{self.extension}"

    @classmethod
    def parse(cls, text: str) -> ArtifactSuffix:
        """Build a suffix from ``"classifier:extension"`` or ``"extension"``."""
        classifier, sep, extension = text.partition(":")
        if not sep:
            return cls(extension=classifier)
        return cls(classifier=classifier, extension=extension)

    def __str__(self) -> str:
        return self.pattern
