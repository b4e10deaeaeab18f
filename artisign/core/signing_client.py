"""HTTP client for the remote signing service.

The service is opaque: the artifact is uploaded as multipart form data in a
field named ``file`` and the response body *is* the signed artifact, written
verbatim to the target path.

On failure a second, non-failing request is issued purely to capture the
service's error message for the log.  Its outcome never replaces the
original error.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from types import TracebackType

import httpx

from artisign.config import SignerSettings
from artisign.core.fileops import ArtifactWriteError, copy_bytes, discard
from artisign.core.hasher import ArtifactReadError
from artisign.models.results import SignOutcome

logger = logging.getLogger(__name__)


class SigningServiceError(RuntimeError):
    """Raised when the signing service does not return a signed artifact."""

    def __init__(
        self, source: Path, message: str, *, status_code: int | None = None
    ) -> None:
        detail = f"HTTP {status_code}" if status_code is not None else "transport error"
        super().__init__(f"Signing {source} failed ({detail}): {message}")
        self.source = source
        self.status_code = status_code


class SigningClient:
    """Signs artifacts through the remote service, or copies them in skip mode.

    Parameters
    ----------
    settings:
        Signer settings.  Uses a fresh ``SignerSettings()`` if not provided.
    http_client:
        An ``httpx.Client`` to use.  When omitted the client creates and
        owns one; injected clients are left open on :meth:`close`.
    skip:
        Overrides ``settings.skip`` for this client.
    """

    def __init__(
        self,
        settings: SignerSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        skip: bool | None = None,
    ) -> None:
        self._settings = settings or SignerSettings()
        self._skip = self._settings.skip if skip is None else skip
        self._owns_client = http_client is None
        if http_client is not None:
            self._client = http_client
        elif self._settings.timeout_seconds is not None:
            self._client = httpx.Client(timeout=self._settings.timeout_seconds)
        else:
            self._client = httpx.Client()

    @property
    def skip(self) -> bool:
        """Whether signing is bypassed in favour of a plain copy."""
        return self._skip

    @property
    def signing_url(self) -> str:
        return self._settings.signing_url

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SigningClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    def sign(self, source: Path, target: Path) -> SignOutcome:
        """Produce the signed counterpart of ``source`` at ``target``.

        Raises
        ------
        SigningServiceError
            If the upload fails or the service answers with an error status.
        ArtifactIOError
            If the source cannot be read or the target cannot be written.
        """
        if self._skip:
            copy_bytes(source, target)
            logger.info("Signing skipped for %s, copied to %s", source.name, target)
            return SignOutcome.SKIPPED

        started = time.monotonic()
        try:
            uploaded = source.stat().st_size
        except OSError as exc:
            raise ArtifactReadError(source, exc) from exc

        try:
            downloaded = self._upload(source, target)
        except httpx.HTTPError as exc:
            discard(target)
            status = (
                exc.response.status_code
                if isinstance(exc, httpx.HTTPStatusError)
                else None
            )
            self._log_service_error(source)
            raise SigningServiceError(source, str(exc), status_code=status) from exc

        logger.info(
            "Signed %s: %d bytes up, %d bytes down in %.2fs",
            source.name,
            uploaded,
            downloaded,
            time.monotonic() - started,
        )
        return SignOutcome.SIGNED

    def _upload(self, source: Path, target: Path) -> int:
        """POST ``source`` and stream the response body into ``target``."""
        try:
            fh = open(source, "rb")
        except OSError as exc:
            raise ArtifactReadError(source, exc) from exc
        with fh:
            files = {"file": (source.name, fh, "application/octet-stream")}
            with self._client.stream("POST", self.signing_url, files=files) as response:
                response.raise_for_status()
                written = 0
                try:
                    with open(target, "wb") as out:
                        for chunk in response.iter_bytes():
                            out.write(chunk)
                            written += len(chunk)
                except OSError as exc:
                    discard(target)
                    raise ArtifactWriteError(target, exc) from exc
                return written

    def _log_service_error(self, source: Path) -> None:
        """Repeat the upload without failing on status, to log the service's message."""
        try:
            with open(source, "rb") as fh:
                files = {"file": (source.name, fh, "application/octet-stream")}
                response = self._client.post(self.signing_url, files=files)
            if not response.is_error:
                logger.debug(
                    "Diagnostic request for %s got HTTP %d; nothing to report",
                    source.name,
                    response.status_code,
                )
                return
            body = response.text[: self._settings.diagnostic_body_limit]
            logger.error(
                "Signing service answered HTTP %d for %s: %s",
                response.status_code,
                source.name,
                body.strip() or "<empty body>",
            )
        except Exception:
            logger.debug(
                "Diagnostic request for %s failed as well", source.name, exc_info=True
            )
