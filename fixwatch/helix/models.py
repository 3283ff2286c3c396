"""Publication status structures returned by the admin status service."""

from __future__ import annotations

import msgspec


class PublishedResource(msgspec.Struct, kw_only=True, frozen=True, rename="camel"):
    """State of a document on one publication surface.

    Attributes
    ----------
    last_modified
        Timestamp of the last publication to the surface, if any.
    url
        Public URL of the document on the surface.

    """

    last_modified: str | None = None
    url: str | None = None


class PublicationStatus(msgspec.Struct, kw_only=True, frozen=True):
    """Live and preview state of a single document.

    Either branch is ``None`` when the admin service omits it.
    """

    live: PublishedResource | None = None
    preview: PublishedResource | None = None


class StatusFetched(msgspec.Struct, kw_only=True, frozen=True, tag="fetched"):
    """Successful status lookup."""

    document_path: str
    status: PublicationStatus


class StatusUnavailable(msgspec.Struct, kw_only=True, frozen=True, tag="unavailable"):
    """Status lookup that failed; the document is skipped, not the run."""

    document_path: str
    reason: str


StatusLookup = StatusFetched | StatusUnavailable
