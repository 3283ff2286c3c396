"""Tracking service client for site routing configuration and fix records."""

from __future__ import annotations

from .client import SpaceCatClient, SpaceCatConfig
from .models import FixRecord, FixStatus, RoutingConfig

__all__ = [
    "FixRecord",
    "FixStatus",
    "RoutingConfig",
    "SpaceCatClient",
    "SpaceCatConfig",
]
