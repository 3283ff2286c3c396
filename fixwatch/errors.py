"""Error taxonomy for fix publication verification.

Fatal failures raise one of the exceptions below and abort the run. A
per-document status failure is not an exception: the admin status client
returns :class:`fixwatch.helix.StatusUnavailable` instead.
"""

from __future__ import annotations


class FixwatchError(Exception):
    """Base class for all fixwatch errors."""


class MissingCredentialError(FixwatchError):
    """Raised when a required credential environment variable is absent."""

    def __init__(self, variable: str) -> None:
        """Initialise with the name of the missing environment variable."""
        self.variable = variable
        super().__init__(f"{variable} environment variable is required")

    @classmethod
    def missing(cls, variable: str) -> MissingCredentialError:
        """Return an error naming the missing environment variable."""
        return cls(variable)


class ConfigurationError(FixwatchError):
    """Raised when a well-formed response lacks required routing data."""

    @classmethod
    def missing_routing(cls, site_id: str) -> ConfigurationError:
        """Return an error for a site without ``hlxConfig.rso``."""
        return cls(f"Site {site_id} does not have RSO configuration in hlxConfig")

    @classmethod
    def missing(cls, site_id: str, field: str) -> ConfigurationError:
        """Return an error for an RSO object missing one of its fields."""
        return cls(f"Site {site_id} RSO configuration is missing {field}")

    @classmethod
    def missing_identifier(cls, name: str) -> ConfigurationError:
        """Return an error for a missing site or opportunity identifier."""
        return cls(f"{name} is required")


class TransportError(FixwatchError):
    """Raised when a tracking service call does not succeed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(
        cls, operation: str, status_code: int, reason: str = ""
    ) -> TransportError:
        """Return an error for non-2xx HTTP responses."""
        detail = f"{status_code} {reason}".strip()
        return cls(f"Failed to fetch {operation}: {detail}", status_code=status_code)

    @classmethod
    def timeout(cls, operation: str) -> TransportError:
        """Return an error for a request that timed out."""
        return cls(f"Failed to fetch {operation}: request timed out")

    @classmethod
    def network_error(cls, operation: str, detail: str) -> TransportError:
        """Return an error for DNS, connection or TLS failures."""
        return cls(f"Failed to fetch {operation}: network error: {detail}")

    @classmethod
    def invalid_body(cls, operation: str, detail: str) -> TransportError:
        """Return an error for a response body of the wrong shape."""
        return cls(f"Failed to fetch {operation}: malformed response: {detail}")


__all__ = [
    "ConfigurationError",
    "FixwatchError",
    "MissingCredentialError",
    "TransportError",
]
