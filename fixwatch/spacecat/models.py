"""Typed models for tracking service sites and fixes."""

from __future__ import annotations

import enum

import msgspec


class FixStatus(enum.StrEnum):
    """Lifecycle states reported for a fix by the tracking service."""

    PENDING = "PENDING"
    DEPLOYED = "DEPLOYED"
    PUBLISHED = "PUBLISHED"
    FAILED = "FAILED"
    ROLLED_BACK = "ROLLED_BACK"


class RoutingConfig(msgspec.Struct, kw_only=True, frozen=True):
    """Routing triple (RSO) identifying the content repository of a site.

    Attributes
    ----------
    owner
        Content repository owner.
    site
        Content repository (site) name.
    ref
        Branch backing the site.

    """

    owner: str
    site: str
    ref: str

    @property
    def slug(self) -> str:
        """Return owner/site/ref identifier."""
        return f"{self.owner}/{self.site}/{self.ref}"


class FixRecord(msgspec.Struct, kw_only=True, frozen=True):
    """A remediation entry for one document.

    ``status`` keeps the raw upstream value so unknown states survive
    decoding; compare it against :class:`FixStatus` members.
    """

    id: str
    status: str
    executed_at: str | None = None
    document_path: str | None = None

    @property
    def is_deployed(self) -> bool:
        """Return True when the fix has been marked deployed."""
        return self.status == FixStatus.DEPLOYED


class ChangeDetailsPayload(msgspec.Struct, rename="camel"):
    """Wire shape of a fix's ``changeDetails`` object."""

    document_path: str | None = None


class FixPayload(msgspec.Struct, rename="camel"):
    """Wire shape of one entry of the fixes listing."""

    id: str
    status: str
    executed_at: str | None = None
    change_details: ChangeDetailsPayload | None = None

    def to_record(self) -> FixRecord:
        """Flatten the wire payload into a :class:`FixRecord`."""
        details = self.change_details
        return FixRecord(
            id=self.id,
            status=self.status,
            executed_at=self.executed_at,
            document_path=details.document_path if details else None,
        )
