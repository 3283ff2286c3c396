"""Admin status client for per-document live and preview state."""

from __future__ import annotations

import dataclasses
import json
import os
import typing as typ

import httpx
import msgspec

from fixwatch.logging import get_logger, log_warning

from .models import PublicationStatus, StatusFetched, StatusLookup, StatusUnavailable

if typ.TYPE_CHECKING:
    from fixwatch.config import Credentials
    from fixwatch.spacecat.models import RoutingConfig

logger = get_logger(__name__)

_DEFAULT_ENDPOINT = "https://admin.hlx.page"
_DEFAULT_TIMEOUT_S = 20.0


@dataclasses.dataclass(frozen=True, slots=True)
class HelixAdminConfig:
    """Configuration for the admin status client."""

    token: str
    endpoint: str = _DEFAULT_ENDPOINT
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = "fixwatch/0.1"

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> HelixAdminConfig:
        """Build configuration from loaded credentials.

        ``FIXWATCH_HELIX_ADMIN_ENDPOINT`` overrides the default base URL.
        """
        endpoint = os.environ.get("FIXWATCH_HELIX_ADMIN_ENDPOINT", "").strip()
        return cls(
            token=credentials.helix_admin_token,
            endpoint=endpoint or _DEFAULT_ENDPOINT,
        )


def normalize_document_path(document_path: str) -> str:
    """Strip leading separators so the path can be appended to the ref."""
    return document_path.lstrip("/")


class HelixAdminClient:
    """HTTP client for the admin ``/status`` endpoint.

    Failures never raise: every lookup returns either
    :class:`StatusFetched` or :class:`StatusUnavailable`.
    """

    def __init__(
        self,
        config: HelixAdminConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided admin configuration."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers={
                "Authorization": f"token {config.token}",
                "User-Agent": config.user_agent,
                "Accept": "application/json",
            },
        )

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    def status_url(self, document_path: str, routing: RoutingConfig) -> str:
        """Return the status endpoint URL for a document."""
        return (
            f"{self._config.endpoint.rstrip('/')}/status/"
            f"{routing.owner}/{routing.site}/{routing.ref}/"
            f"{normalize_document_path(document_path)}"
        )

    async def fetch_status(
        self, document_path: str, routing: RoutingConfig
    ) -> StatusLookup:
        """Fetch live and preview state for a document.

        Parameters
        ----------
        document_path
            Document path as recorded on the fix; leading ``/`` is ignored.
        routing
            Routing configuration of the site owning the document.

        Returns
        -------
        StatusLookup
            ``StatusFetched`` on success. ``StatusUnavailable`` for non-2xx
            responses, network failures, timeouts and malformed bodies.

        """
        try:
            response = await self._client.get(self.status_url(document_path, routing))
        except httpx.TimeoutException:
            return self._unavailable(document_path, "request timed out")
        except httpx.RequestError as exc:
            return self._unavailable(document_path, f"network error: {exc}")

        if not response.is_success:
            detail = f"{response.status_code} {response.reason_phrase}".strip()
            return self._unavailable(document_path, detail)

        try:
            status = msgspec.convert(response.json(), type=PublicationStatus)
        except (json.JSONDecodeError, msgspec.ValidationError) as exc:
            return self._unavailable(document_path, f"malformed response: {exc}")
        return StatusFetched(document_path=document_path, status=status)

    @staticmethod
    def _unavailable(document_path: str, reason: str) -> StatusUnavailable:
        log_warning(
            logger, "Error fetching status for %s: %s", document_path, reason
        )
        return StatusUnavailable(document_path=document_path, reason=reason)
