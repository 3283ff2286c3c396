"""Evidence and result structures for publication verification."""

from __future__ import annotations

import enum

import msgspec


class SurfaceOutcome(enum.StrEnum):
    """Classification of one publication surface for one document."""

    PUBLISHED = "published"
    STALE = "stale"
    MISSING = "missing"
    INVALID = "invalid"


class Surface(enum.StrEnum):
    """Publication surfaces reported by the admin service."""

    LIVE = "live"
    PREVIEW = "preview"


class PublicationEvidence(msgspec.Struct, kw_only=True, frozen=True, rename="camel"):
    """Proof that a surface was published after a fix executed.

    Attributes
    ----------
    document_path
        Document the fix applied to.
    executed_at
        When the fix was executed.
    last_modified
        When the surface was last published.
    url
        Public URL of the document on the surface.

    """

    document_path: str
    executed_at: str | None
    last_modified: str
    url: str | None = None


class DocumentCheck(msgspec.Struct, kw_only=True, frozen=True):
    """Per-document classification of both surfaces."""

    fix_id: str
    document_path: str
    executed_at: str | None
    live: SurfaceOutcome
    preview: SurfaceOutcome


class SkippedDocument(msgspec.Struct, kw_only=True, frozen=True):
    """A qualifying fix whose publication status could not be fetched."""

    fix_id: str
    document_path: str
    reason: str


class EvidenceDetails(msgspec.Struct, kw_only=True, frozen=True):
    """Full evidence entries for both surfaces, in fix order."""

    live: tuple[PublicationEvidence, ...] = ()
    preview: tuple[PublicationEvidence, ...] = ()


class VerificationResult(msgspec.Struct, kw_only=True, frozen=True):
    """Outcome of verifying the deployed fixes of one opportunity.

    Attributes
    ----------
    details
        Evidence entries for the live and preview surfaces.
    checks
        Surface classification for every document whose status was fetched.
    skipped
        Documents whose status was unavailable.
    total_fixes
        Number of fixes returned by the tracking service.
    qualifying_fixes
        Number of deployed fixes with a document path.

    """

    details: EvidenceDetails = msgspec.field(default_factory=EvidenceDetails)
    checks: tuple[DocumentCheck, ...] = ()
    skipped: tuple[SkippedDocument, ...] = ()
    total_fixes: int = 0
    qualifying_fixes: int = 0

    @property
    def live_published_pages(self) -> list[str]:
        """Return document paths with live evidence."""
        return [evidence.document_path for evidence in self.details.live]

    @property
    def preview_published_pages(self) -> list[str]:
        """Return document paths with preview evidence."""
        return [evidence.document_path for evidence in self.details.preview]
