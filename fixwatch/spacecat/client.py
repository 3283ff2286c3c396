"""Tracking service client for site routing and fix listings."""

from __future__ import annotations

import dataclasses
import json
import os
import typing as typ

import httpx
import msgspec

from fixwatch.errors import ConfigurationError, TransportError
from fixwatch.logging import get_logger, log_info, log_warning

from .models import FixPayload, FixRecord, RoutingConfig

if typ.TYPE_CHECKING:
    from fixwatch.config import Credentials

logger = get_logger(__name__)

_DEFAULT_ENDPOINT = "https://spacecat.experiencecloud.live/api/v1"
_DEFAULT_TIMEOUT_S = 20.0
_ROUTING_FIELDS = ("owner", "site", "ref")


@dataclasses.dataclass(frozen=True, slots=True)
class SpaceCatConfig:
    """Configuration for the tracking service client."""

    api_key: str
    endpoint: str = _DEFAULT_ENDPOINT
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = "fixwatch/0.1"

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> SpaceCatConfig:
        """Build configuration from loaded credentials.

        ``FIXWATCH_SPACECAT_ENDPOINT`` overrides the default API base URL.
        """
        endpoint = os.environ.get("FIXWATCH_SPACECAT_ENDPOINT", "").strip()
        return cls(
            api_key=credentials.spacecat_api_key,
            endpoint=endpoint or _DEFAULT_ENDPOINT,
        )


def _routing_from_site(site_id: str, payload: object) -> RoutingConfig:
    """Extract ``hlxConfig.rso`` from a site detail payload."""
    if not isinstance(payload, dict):
        raise TransportError.invalid_body("site details", "expected a JSON object")
    hlx_config = payload.get("hlxConfig")
    rso = hlx_config.get("rso") if isinstance(hlx_config, dict) else None
    if not isinstance(rso, dict):
        raise ConfigurationError.missing_routing(site_id)

    values: dict[str, str] = {}
    for field in _ROUTING_FIELDS:
        value = rso.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError.missing(site_id, field)
        values[field] = value
    return RoutingConfig(**values)


def _records_from_fixes(payload: object) -> list[FixRecord]:
    """Decode the fixes listing into records, preserving order.

    Entries that do not match the fix shape are dropped with a warning so a
    single malformed record cannot hide the rest of the listing.
    """
    if not isinstance(payload, list):
        raise TransportError.invalid_body("fixes", "expected a JSON array")
    records: list[FixRecord] = []
    for index, entry in enumerate(payload):
        try:
            fix = msgspec.convert(entry, type=FixPayload)
        except msgspec.ValidationError as exc:
            log_warning(logger, "Skipping malformed fix at index %d: %s", index, exc)
            continue
        records.append(fix.to_record())
    return records


class SpaceCatClient:
    """HTTP client for the tracking service site and fix endpoints."""

    def __init__(
        self,
        config: SpaceCatConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers={
                "x-api-key": config.api_key,
                "User-Agent": config.user_agent,
                "Accept": "application/json",
            },
        )

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def get_routing_config(self, site_id: str) -> RoutingConfig:
        """Fetch the routing configuration for a site.

        Raises
        ------
        TransportError
            If the request fails or returns a non-2xx status.
        ConfigurationError
            If the site has no complete ``hlxConfig.rso`` object.

        """
        payload = await self._get_json(f"/sites/{site_id}", operation="site details")
        routing = _routing_from_site(site_id, payload)
        log_info(logger, "Using RSO config: %s", routing.slug)
        return routing

    async def list_fixes(self, site_id: str, opportunity_id: str) -> list[FixRecord]:
        """Fetch every fix recorded for a site opportunity, in upstream order.

        Raises
        ------
        TransportError
            If the request fails, returns a non-2xx status, or the body is
            not a JSON array. Malformed entries inside the array are skipped.

        """
        payload = await self._get_json(
            f"/sites/{site_id}/opportunities/{opportunity_id}/fixes",
            operation="fixes",
        )
        records = _records_from_fixes(payload)
        log_info(logger, "Found %d total fixes", len(records))
        return records

    async def _get_json(self, path: str, *, operation: str) -> object:
        """Issue a GET request and return the decoded JSON body."""
        url = f"{self._config.endpoint.rstrip('/')}{path}"
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as exc:
            raise TransportError.timeout(operation) from exc
        except httpx.RequestError as exc:
            raise TransportError.network_error(operation, str(exc)) from exc

        if not response.is_success:
            raise TransportError.http_error(
                operation, response.status_code, response.reason_phrase
            )
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise TransportError.invalid_body(operation, str(exc)) from exc
