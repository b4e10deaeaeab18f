"""Process-wide signer settings — env-driven.

Centralized config using pydantic-settings.  Reads from a .env file and
ARTISIGN_* environment variables.

Examples
--------
Override via environment::

    export ARTISIGN_SIGNING_URL=https://signing.example.com/sign
    export ARTISIGN_SKIP=true
    export ARTISIGN_SUFFIXES='["jar", "sources:jar", "pom"]'
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class SignerSettings(BaseSettings):
    """Settings shared by every signing pass in this process."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARTISIGN_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Signing service
    signing_url: str = "http://localhost:8080/sign"
    timeout_seconds: float | None = None  # None: transport default
    diagnostic_body_limit: int = 4096

    # Equivalent of the build's "signing.skip" property
    skip: bool = False

    # Reuse defaults, overridable per run
    suffixes: list[str] = []
    fail_on_inconsistency: bool = False

    log_level: str = "INFO"

