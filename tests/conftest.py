"""Shared test fixtures for Artisign."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from artisign.config import SignerSettings
from artisign.core.signing_client import SigningClient
from artisign.models.config import SignTaskConfig
from artisign.models.suffixes import ArtifactSuffix


class FakeSigningService:
    """Records every request and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.bodies: list[bytes] = []
        self.signed_body = b"-----SIGNED ARTIFACT-----"
        self.responder: Callable[[httpx.Request, int], httpx.Response] = self._sign

    def _sign(self, request: httpx.Request, attempt: int) -> httpx.Response:
        return httpx.Response(200, content=self.signed_body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        self.bodies.append(request.content)
        return self.responder(request, len(self.requests))

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def layout(tmp_dir: Path) -> dict[str, Path]:
    """Input, output and previous-build directories for one signing pass."""
    dirs = {
        "input": tmp_dir / "build" / "distributions",
        "output": tmp_dir / "build" / "signed",
        "alt_source": tmp_dir / "previous" / "distributions",
        "alt_target": tmp_dir / "previous" / "signed",
    }
    for name in ("input", "alt_source", "alt_target"):
        dirs[name].mkdir(parents=True)
    return dirs


@pytest.fixture
def suffixes() -> list[ArtifactSuffix]:
    """A typical JVM-style suffix configuration."""
    return [
        ArtifactSuffix(extension="jar"),
        ArtifactSuffix(classifier="sources", extension="jar"),
        ArtifactSuffix(classifier="javadoc", extension="jar"),
        ArtifactSuffix(extension="pom"),
        ArtifactSuffix(extension="zip"),
    ]


@pytest.fixture
def task_config(layout: dict[str, Path], suffixes: list[ArtifactSuffix]) -> SignTaskConfig:
    """Task config with both alternate directories configured."""
    return SignTaskConfig(
        output_dir=layout["output"],
        alternate_source_dir=layout["alt_source"],
        alternate_target_dir=layout["alt_target"],
        suffixes=suffixes,
    )


@pytest.fixture
def settings() -> SignerSettings:
    """Signer settings pointing at a fake endpoint."""
    return SignerSettings(signing_url="https://signer.test/sign", skip=False)


@pytest.fixture
def signing_service() -> FakeSigningService:
    return FakeSigningService()


@pytest.fixture
def signing_client(
    settings: SignerSettings, signing_service: FakeSigningService
) -> SigningClient:
    """A SigningClient whose HTTP traffic goes to the fake service."""
    http_client = httpx.Client(transport=httpx.MockTransport(signing_service.handler))
    return SigningClient(settings, http_client=http_client)


@pytest.fixture
def write_file() -> Callable[[Path, bytes], Path]:
    """Factory fixture: write bytes to a path, creating parents."""

    def _write(path: Path, data: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write
