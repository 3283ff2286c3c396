"""Admin status client for live and preview publication state."""

from __future__ import annotations

from .client import HelixAdminClient, HelixAdminConfig, normalize_document_path
from .models import (
    PublicationStatus,
    PublishedResource,
    StatusFetched,
    StatusLookup,
    StatusUnavailable,
)

__all__ = [
    "HelixAdminClient",
    "HelixAdminConfig",
    "PublicationStatus",
    "PublishedResource",
    "StatusFetched",
    "StatusLookup",
    "StatusUnavailable",
    "normalize_document_path",
]
