"""Verify that deployed content fixes reached the live or preview surface."""

from __future__ import annotations

from .dates import is_after, parse_timestamp
from .errors import (
    ConfigurationError,
    FixwatchError,
    MissingCredentialError,
    TransportError,
)

__all__ = [
    "ConfigurationError",
    "FixwatchError",
    "MissingCredentialError",
    "TransportError",
    "is_after",
    "parse_timestamp",
]
