"""Invocation target for a verification run.

The site and opportunity identifiers are passed explicitly to the verifier
rather than read from module state. They can come from CLI options or from
``FIXWATCH_SITE_ID`` / ``FIXWATCH_OPPORTUNITY_ID``.
"""

from __future__ import annotations

import dataclasses as dc
import os

from fixwatch.errors import ConfigurationError

DEFAULT_DELAY_S = 0.1


@dc.dataclass(frozen=True, slots=True)
class VerificationTarget:
    """Site opportunity whose deployed fixes are verified.

    Attributes
    ----------
    site_id
        Tracking service site identifier.
    opportunity_id
        Tracking service opportunity identifier.
    delay_s
        Pause between consecutive status lookups, in seconds.

    """

    site_id: str
    opportunity_id: str
    delay_s: float = DEFAULT_DELAY_S

    def __post_init__(self) -> None:
        """Reject blank identifiers and negative delays."""
        if not self.site_id.strip():
            raise ConfigurationError.missing_identifier("site id")
        if not self.opportunity_id.strip():
            raise ConfigurationError.missing_identifier("opportunity id")
        if self.delay_s < 0:
            msg = f"delay must be non-negative, got: {self.delay_s}"
            raise ValueError(msg)

    @classmethod
    def resolve(
        cls,
        *,
        site_id: str | None = None,
        opportunity_id: str | None = None,
        delay_s: float = DEFAULT_DELAY_S,
    ) -> VerificationTarget:
        """Build a target, falling back to environment variables.

        Raises
        ------
        ConfigurationError
            If an identifier is given neither explicitly nor in the
            environment.

        """
        return cls(
            site_id=site_id or os.environ.get("FIXWATCH_SITE_ID", ""),
            opportunity_id=opportunity_id
            or os.environ.get("FIXWATCH_OPPORTUNITY_ID", ""),
            delay_s=delay_s,
        )
