"""Credential loading for the tracking and admin services."""

from __future__ import annotations

import dataclasses
import os

from fixwatch.errors import MissingCredentialError

SPACECAT_API_KEY_ENV = "SPACECAT_API_KEY"
HELIX_ADMIN_TOKEN_ENV = "HELIX_ADMIN_TOKEN"  # noqa: S105 - env var name


def _required_env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise MissingCredentialError.missing(name)
    return value


@dataclasses.dataclass(frozen=True, slots=True)
class Credentials:
    """Credentials for both upstream services.

    Attributes
    ----------
    spacecat_api_key
        API key sent as ``x-api-key`` to the tracking service.
    helix_admin_token
        Token sent as ``Authorization: token ...`` to the admin service.

    """

    spacecat_api_key: str
    helix_admin_token: str

    @classmethod
    def from_env(cls) -> Credentials:
        """Build credentials from ``SPACECAT_API_KEY`` and ``HELIX_ADMIN_TOKEN``.

        Raises
        ------
        MissingCredentialError
            If either variable is unset or blank. The tracking service key is
            checked first.

        """
        return cls(
            spacecat_api_key=_required_env(SPACECAT_API_KEY_ENV),
            helix_admin_token=_required_env(HELIX_ADMIN_TOKEN_ENV),
        )


__all__ = ["HELIX_ADMIN_TOKEN_ENV", "SPACECAT_API_KEY_ENV", "Credentials"]
