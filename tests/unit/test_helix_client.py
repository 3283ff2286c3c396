"""Unit tests for the admin status client."""

from __future__ import annotations

import secrets

import httpx
import pytest

from fixwatch.helix import (
    HelixAdminClient,
    HelixAdminConfig,
    PublicationStatus,
    PublishedResource,
    StatusFetched,
    StatusUnavailable,
    normalize_document_path,
)
from fixwatch.spacecat import RoutingConfig

_TOKEN = secrets.token_hex(8)
_ENDPOINT = "https://admin.example.test"
_ROUTING = RoutingConfig(owner="acme", site="widgets", ref="main")


def _make_client(
    response: httpx.Response | Exception,
) -> tuple[HelixAdminClient, httpx.AsyncClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if isinstance(response, Exception):
            raise response
        return response

    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(_handler),
        headers={"Authorization": f"token {_TOKEN}"},
    )
    client = HelixAdminClient(
        HelixAdminConfig(token=_TOKEN, endpoint=_ENDPOINT),
        http_client=http_client,
    )
    return client, http_client, requests


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/products/widget", "products/widget"),
        ("///products/widget", "products/widget"),
        ("products/widget", "products/widget"),
        ("/", ""),
    ],
    ids=["single-slash", "many-slashes", "relative", "root"],
)
def test_normalize_document_path_strips_leading_separators(
    raw: str, expected: str
) -> None:
    """Leading separators are removed; the rest of the path is untouched."""
    assert normalize_document_path(raw) == expected


@pytest.mark.asyncio
async def test_fetch_status_decodes_live_and_preview() -> None:
    """A 2xx response yields StatusFetched with both surfaces."""
    body = {
        "webPath": "/products/widget",
        "live": {
            "status": 200,
            "url": "https://main--widgets--acme.aem.live/products/widget",
            "lastModified": "2025-07-11T16:30:00.000Z",
        },
        "preview": {
            "status": 200,
            "url": "https://main--widgets--acme.aem.page/products/widget",
            "lastModified": "2025-07-11T16:00:00.000Z",
        },
    }
    client, http_client, requests = _make_client(httpx.Response(200, json=body))
    try:
        lookup = await client.fetch_status("/products/widget", _ROUTING)
    finally:
        await http_client.aclose()

    assert lookup == StatusFetched(
        document_path="/products/widget",
        status=PublicationStatus(
            live=PublishedResource(
                last_modified="2025-07-11T16:30:00.000Z",
                url="https://main--widgets--acme.aem.live/products/widget",
            ),
            preview=PublishedResource(
                last_modified="2025-07-11T16:00:00.000Z",
                url="https://main--widgets--acme.aem.page/products/widget",
            ),
        ),
    )
    assert str(requests[0].url) == (
        f"{_ENDPOINT}/status/acme/widgets/main/products/widget"
    )
    assert requests[0].headers["Authorization"] == f"token {_TOKEN}"


@pytest.mark.asyncio
async def test_fetch_status_tolerates_absent_branches() -> None:
    """Missing branches and missing lastModified decode as absent values."""
    body = {"preview": {"status": 404}}
    client, http_client, _ = _make_client(httpx.Response(200, json=body))
    try:
        lookup = await client.fetch_status("docs/page", _ROUTING)
    finally:
        await http_client.aclose()

    assert isinstance(lookup, StatusFetched)
    assert lookup.status.live is None
    assert lookup.status.preview == PublishedResource()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("response", "reason_fragment"),
    [
        (httpx.Response(404, json={}), "404"),
        (httpx.Response(401, json={}), "401"),
        (httpx.ConnectError("refused"), "network error"),
        (httpx.ReadTimeout("slow"), "timed out"),
        (httpx.Response(200, text="not json"), "malformed response"),
        (httpx.Response(200, json=["unexpected"]), "malformed response"),
        (httpx.Response(200, json={"live": "yesterday"}), "malformed response"),
    ],
    ids=[
        "not-found",
        "unauthorised",
        "network",
        "timeout",
        "not-json",
        "array-body",
        "wrong-branch-type",
    ],
)
async def test_fetch_status_failures_return_unavailable(
    response: httpx.Response | Exception, reason_fragment: str
) -> None:
    """Per-document failures are returned as values rather than raised."""
    client, http_client, _ = _make_client(response)
    try:
        lookup = await client.fetch_status("/products/widget", _ROUTING)
    finally:
        await http_client.aclose()

    assert isinstance(lookup, StatusUnavailable)
    assert lookup.document_path == "/products/widget"
    assert reason_fragment in lookup.reason


@pytest.mark.asyncio
async def test_owned_client_sends_token_authorization() -> None:
    """A client built without an injected transport uses token auth."""
    client = HelixAdminClient(HelixAdminConfig(token=_TOKEN))
    try:
        assert client._client.headers["Authorization"] == f"token {_TOKEN}"
        assert client.status_url("/a/b", _ROUTING) == (
            "https://admin.hlx.page/status/acme/widgets/main/a/b"
        )
    finally:
        await client.aclose()
