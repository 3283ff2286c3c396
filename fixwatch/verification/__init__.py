"""Verification that deployed fixes reached the live or preview surface."""

from __future__ import annotations

from .config import DEFAULT_DELAY_S, VerificationTarget
from .models import (
    DocumentCheck,
    EvidenceDetails,
    PublicationEvidence,
    SkippedDocument,
    Surface,
    SurfaceOutcome,
    VerificationResult,
)
from .report import (
    encode_summary_json,
    render_summary,
    render_summary_arrays,
    to_summary_dict,
)
from .service import (
    PublicationVerifier,
    SiteSource,
    StatusSource,
    VerifierDependencies,
    classify_surface,
    select_qualifying_fixes,
)

__all__ = [
    "DEFAULT_DELAY_S",
    "DocumentCheck",
    "EvidenceDetails",
    "PublicationEvidence",
    "PublicationVerifier",
    "SiteSource",
    "SkippedDocument",
    "StatusSource",
    "Surface",
    "SurfaceOutcome",
    "VerificationResult",
    "VerificationTarget",
    "VerifierDependencies",
    "classify_surface",
    "encode_summary_json",
    "render_summary",
    "render_summary_arrays",
    "select_qualifying_fixes",
    "to_summary_dict",
]
