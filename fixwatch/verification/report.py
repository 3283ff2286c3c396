"""Console and programmatic renderings of a verification result.

Usage
-----
>>> from fixwatch.verification.report import render_summary, to_summary_dict
>>> print(render_summary(result))
>>> to_summary_dict(result)["livePublishedPages"]
['/products/widget']

"""

from __future__ import annotations

import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    from .models import PublicationEvidence, VerificationResult

_RULE = "=" * 80


def to_summary_dict(result: VerificationResult) -> dict[str, typ.Any]:
    """Return the result as plain data for programmatic consumers.

    The shape is ``{livePublishedPages, previewPublishedPages,
    details: {live, preview}}`` where each detail entry carries
    ``documentPath``, ``executedAt``, ``lastModified`` and ``url``.
    """
    return {
        "livePublishedPages": result.live_published_pages,
        "previewPublishedPages": result.preview_published_pages,
        "details": {
            "live": msgspec.to_builtins(result.details.live),
            "preview": msgspec.to_builtins(result.details.preview),
        },
    }


def encode_summary_json(result: VerificationResult) -> str:
    """Encode :func:`to_summary_dict` as indented JSON."""
    encoded = msgspec.json.encode(to_summary_dict(result))
    return msgspec.json.format(encoded, indent=2).decode("utf-8")


def _render_section(
    lines: list[str],
    heading: str,
    label: str,
    entries: tuple[PublicationEvidence, ...],
) -> None:
    lines.append(f"{heading} ({len(entries)}):")
    if not entries:
        lines.append("  None found.")
        lines.append("")
        return
    for entry in entries:
        lines.append(f"  • {entry.document_path}")
        lines.append(f"    Fix executed: {entry.executed_at}")
        lines.append(f"    {label} published: {entry.last_modified}")
        lines.append(f"    {label} URL: {entry.url}")
        lines.append("")


def render_summary(result: VerificationResult) -> str:
    """Render the human-readable results summary."""
    lines: list[str] = [_RULE, "RESULTS SUMMARY", _RULE, ""]
    _render_section(lines, "LIVE PUBLISHED PAGES", "Live", result.details.live)
    _render_section(
        lines, "PREVIEW PUBLISHED PAGES", "Preview", result.details.preview
    )
    if result.skipped:
        lines.append(f"SKIPPED ({len(result.skipped)}):")
        lines.extend(
            f"  • {skipped.document_path}: {skipped.reason}"
            for skipped in result.skipped
        )
        lines.append("")
    return "\n".join(lines)


def render_summary_arrays(result: VerificationResult) -> str:
    """Render the live and preview path arrays as indented JSON."""
    live = msgspec.json.format(
        msgspec.json.encode(result.live_published_pages), indent=2
    ).decode("utf-8")
    preview = msgspec.json.format(
        msgspec.json.encode(result.preview_published_pages), indent=2
    ).decode("utf-8")
    return "\n".join(
        [
            "Summary Arrays:",
            f"Live published paths: {live}",
            f"Preview published paths: {preview}",
        ]
    )
