"""Publication verification workflow.

This module provides the PublicationVerifier which orchestrates a single
verification run:

1. Resolve the site's routing configuration from the tracking service
2. List the opportunity's fixes and keep deployed fixes with a document path
3. Fetch the admin status of each document, one at a time
4. Record live and preview evidence where publication followed the fix

Usage
-----
>>> from fixwatch.helix import HelixAdminClient
>>> from fixwatch.spacecat import SpaceCatClient
>>> from fixwatch.verification import (
...     PublicationVerifier,
...     VerificationTarget,
...     VerifierDependencies,
... )
>>>
>>> verifier = PublicationVerifier(
...     VerifierDependencies(sites=spacecat_client, status=helix_client)
... )
>>> result = await verifier.verify(VerificationTarget(site_id, opportunity_id))

"""

from __future__ import annotations

import asyncio
import collections.abc as cabc
import dataclasses as dc
import typing as typ

from fixwatch.dates import is_after, parse_timestamp
from fixwatch.helix.models import StatusUnavailable
from fixwatch.logging import get_logger, log_info, log_warning

from .models import (
    DocumentCheck,
    EvidenceDetails,
    PublicationEvidence,
    SkippedDocument,
    Surface,
    SurfaceOutcome,
    VerificationResult,
)

if typ.TYPE_CHECKING:
    from fixwatch.helix.models import PublishedResource, StatusLookup
    from fixwatch.spacecat.models import FixRecord, RoutingConfig

    from .config import VerificationTarget

logger = get_logger(__name__)

Sleep = cabc.Callable[[float], cabc.Awaitable[None]]


class SiteSource(typ.Protocol):
    """Source of routing configuration and fix records for a site."""

    async def get_routing_config(self, site_id: str) -> RoutingConfig:
        """Return the site's routing configuration."""
        ...

    async def list_fixes(self, site_id: str, opportunity_id: str) -> list[FixRecord]:
        """Return every fix recorded for the opportunity, in order."""
        ...


class StatusSource(typ.Protocol):
    """Source of per-document publication status."""

    async def fetch_status(
        self, document_path: str, routing: RoutingConfig
    ) -> StatusLookup:
        """Return the document's status or the reason it is unavailable."""
        ...


@dc.dataclass(frozen=True, slots=True)
class VerifierDependencies:
    """Collaborators for PublicationVerifier.

    Attributes
    ----------
    sites
        Tracking service client for routing configuration and fixes.
    status
        Admin service client for per-document status.
    sleep
        Awaitable pause used between status lookups. Tests inject a
        recorder instead of waiting.

    """

    sites: SiteSource
    status: StatusSource
    sleep: Sleep = asyncio.sleep


def select_qualifying_fixes(fixes: cabc.Iterable[FixRecord]) -> list[FixRecord]:
    """Keep deployed fixes that name a document, preserving order."""
    return [fix for fix in fixes if fix.is_deployed and fix.document_path]


def classify_surface(
    resource: PublishedResource | None, executed_at: str | None
) -> SurfaceOutcome:
    """Classify one surface of a document against the fix execution time."""
    if resource is None or not resource.last_modified:
        return SurfaceOutcome.MISSING
    if parse_timestamp(resource.last_modified) is None:
        return SurfaceOutcome.INVALID
    if parse_timestamp(executed_at) is None:
        return SurfaceOutcome.INVALID
    if is_after(resource.last_modified, executed_at):
        return SurfaceOutcome.PUBLISHED
    return SurfaceOutcome.STALE


@dc.dataclass(slots=True)
class _EvidenceAccumulator:
    live: list[PublicationEvidence] = dc.field(default_factory=list)
    preview: list[PublicationEvidence] = dc.field(default_factory=list)
    checks: list[DocumentCheck] = dc.field(default_factory=list)
    skipped: list[SkippedDocument] = dc.field(default_factory=list)

    def result(self, *, total_fixes: int, qualifying_fixes: int) -> VerificationResult:
        return VerificationResult(
            details=EvidenceDetails(live=tuple(self.live), preview=tuple(self.preview)),
            checks=tuple(self.checks),
            skipped=tuple(self.skipped),
            total_fixes=total_fixes,
            qualifying_fixes=qualifying_fixes,
        )


class PublicationVerifier:
    """Verifies that deployed fixes were published after they executed.

    The verifier holds no state between runs and only reads from the
    upstream services. Status lookups run sequentially with a fixed pause
    between them.
    """

    def __init__(self, dependencies: VerifierDependencies) -> None:
        """Configure the verifier with its collaborators."""
        self._deps = dependencies

    async def verify(self, target: VerificationTarget) -> VerificationResult:
        """Run a verification for one site opportunity.

        Parameters
        ----------
        target
            Site and opportunity to verify, plus the inter-lookup delay.
            The delay is awaited before every lookup after the first, even
            when the previous lookup was skipped.

        Returns
        -------
        VerificationResult
            Evidence for both surfaces, per-document checks and skipped
            documents. Empty when no fix qualifies.

        Raises
        ------
        ConfigurationError
            If the site has no routing configuration.
        TransportError
            If the routing configuration or the fixes cannot be fetched.

        """
        log_info(logger, "Fetching site details and fixed pages...")
        routing = await self._deps.sites.get_routing_config(target.site_id)
        fixes = await self._deps.sites.list_fixes(
            target.site_id, target.opportunity_id
        )
        qualifying = select_qualifying_fixes(fixes)
        log_info(
            logger, "Found %d deployed fixes with document paths", len(qualifying)
        )

        accumulator = _EvidenceAccumulator()
        if not qualifying:
            log_info(logger, "No deployed fixes with document paths found.")
            return accumulator.result(total_fixes=len(fixes), qualifying_fixes=0)

        log_info(logger, "Checking publication status for each page...")
        for index, fix in enumerate(qualifying):
            if index:
                await self._deps.sleep(target.delay_s)
            await self._check_fix(fix, routing, accumulator)

        return accumulator.result(
            total_fixes=len(fixes), qualifying_fixes=len(qualifying)
        )

    async def _check_fix(
        self,
        fix: FixRecord,
        routing: RoutingConfig,
        accumulator: _EvidenceAccumulator,
    ) -> None:
        document_path = typ.cast("str", fix.document_path)
        log_info(
            logger, "Checking %s (executed at: %s)", document_path, fix.executed_at
        )
        lookup = await self._deps.status.fetch_status(document_path, routing)
        if isinstance(lookup, StatusUnavailable):
            log_warning(logger, "  Failed to get status for %s", document_path)
            accumulator.skipped.append(
                SkippedDocument(
                    fix_id=fix.id, document_path=document_path, reason=lookup.reason
                )
            )
            return

        outcomes: dict[Surface, SurfaceOutcome] = {}
        for surface, resource, bucket in (
            (Surface.LIVE, lookup.status.live, accumulator.live),
            (Surface.PREVIEW, lookup.status.preview, accumulator.preview),
        ):
            outcome = classify_surface(resource, fix.executed_at)
            outcomes[surface] = outcome
            _log_outcome(surface, outcome, resource, fix)
            if outcome is SurfaceOutcome.PUBLISHED and resource is not None:
                bucket.append(
                    PublicationEvidence(
                        document_path=document_path,
                        executed_at=fix.executed_at,
                        last_modified=typ.cast("str", resource.last_modified),
                        url=resource.url,
                    )
                )

        accumulator.checks.append(
            DocumentCheck(
                fix_id=fix.id,
                document_path=document_path,
                executed_at=fix.executed_at,
                live=outcomes[Surface.LIVE],
                preview=outcomes[Surface.PREVIEW],
            )
        )


def _log_outcome(
    surface: Surface,
    outcome: SurfaceOutcome,
    resource: PublishedResource | None,
    fix: FixRecord,
) -> None:
    label = surface.value.capitalize()
    last_modified = resource.last_modified if resource else None
    match outcome:
        case SurfaceOutcome.PUBLISHED:
            log_info(logger, "  %s published after fix (%s)", label, last_modified)
        case SurfaceOutcome.STALE:
            log_info(logger, "  %s not updated since fix (%s)", label, last_modified)
        case SurfaceOutcome.MISSING:
            log_info(logger, "  No %s version available", surface.value)
        case SurfaceOutcome.INVALID:
            log_warning(
                logger,
                "  %s timestamp for %s is not comparable "
                "(lastModified=%r, executedAt=%r); no evidence recorded",
                label,
                fix.document_path,
                last_modified,
                fix.executed_at,
            )
