# =============================================================================
# core/config.py  —  Process-Wide Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Decides, once at startup, which registry the server talks to and where
#   documentation links and documentation sources live.
#
# REGISTRY SELECTION (first match wins):
#   1. An explicit override: the --registry-url CLI option, or the
#      REGISTRY_BASE_URL environment variable.
#   2. Development mode: the --dev CLI flag, or BRUTALIST_UI_ENV set to
#      "development" / "dev"  →  http://localhost:3000/registry/react
#   3. Production  →  https://brutalist.precast.dev/registry/react
#
# OTHER ENVIRONMENT VARIABLES:
#   BRUTALIST_DOCS_DIR   Directory holding the website's docs page sources
#                        (the folder that contains components/ButtonPage.tsx).
#                        When unset, documentation tools return default records.
#
# The resulting Settings object is frozen.  There is no hot reload.
# =============================================================================

from dataclasses import dataclass
import os
from typing import Mapping, Optional

from core.cache import DEFAULT_TTL_SECONDS

PRODUCTION_SITE_URL = "https://brutalist.precast.dev"
DEVELOPMENT_SITE_URL = "http://localhost:3000"
REGISTRY_PATH = "/registry/react"

_DEV_MODES = {"development", "dev"}


@dataclass(frozen=True)
class Settings:
    """Configuration chosen once per process."""

    registry_base_url: str             # e.g. "https://brutalist.precast.dev/registry/react"
    site_url: str                      # Where /docs/... links point
    docs_root: Optional[str] = None    # Local docs page sources, if available
    cache_ttl_seconds: float = DEFAULT_TTL_SECONDS

    @classmethod
    def from_env(
        cls,
        registry_url: Optional[str] = None,
        dev: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Build settings from CLI values, falling back to the environment.

        Args:
            registry_url: Explicit registry base URL (highest priority).
            dev: Whether the --dev flag was passed.
            environ: Environment mapping; defaults to ``os.environ``.
        """
        env = os.environ if environ is None else environ

        is_dev = dev or env.get("BRUTALIST_UI_ENV", "").lower() in _DEV_MODES
        site_url = DEVELOPMENT_SITE_URL if is_dev else PRODUCTION_SITE_URL

        override = registry_url or env.get("REGISTRY_BASE_URL")
        if override:
            base_url = override.rstrip("/")
        else:
            base_url = f"{site_url}{REGISTRY_PATH}"

        return cls(
            registry_base_url=base_url,
            site_url=site_url,
            docs_root=env.get("BRUTALIST_DOCS_DIR") or None,
        )
