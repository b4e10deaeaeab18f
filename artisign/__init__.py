"""Artisign: release-artifact signing with content-addressed reuse.

Signs build outputs by delegating to a remote HTTP signing service, and
avoids re-signing files whose content is byte-identical to an artifact
already signed in a previous build location.
"""

__version__ = "0.1.0"
__description__ = "Release-artifact signing with content-addressed signature reuse"

from artisign.core.orchestrator import SignOrchestrator
from artisign.core.signing_client import SigningClient
from artisign.models.config import SignTaskConfig

__all__ = ["SignOrchestrator", "SigningClient", "SignTaskConfig", "__version__"]
