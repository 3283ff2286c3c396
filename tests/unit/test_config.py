"""Unit tests for credential and target configuration."""

from __future__ import annotations

import dataclasses
import os
from unittest import mock

import pytest

from fixwatch.config import Credentials
from fixwatch.errors import ConfigurationError, MissingCredentialError
from fixwatch.helix import HelixAdminConfig
from fixwatch.spacecat import SpaceCatConfig
from fixwatch.verification import DEFAULT_DELAY_S, VerificationTarget


class TestCredentialsFromEnv:
    """Tests for Credentials.from_env."""

    def test_reads_both_credentials(self) -> None:
        """Both variables are read and stripped."""
        env = {"SPACECAT_API_KEY": " sc-key ", "HELIX_ADMIN_TOKEN": "hx-token\n"}
        with mock.patch.dict(os.environ, env, clear=True):
            credentials = Credentials.from_env()

        assert credentials == Credentials(
            spacecat_api_key="sc-key", helix_admin_token="hx-token"
        )

    @pytest.mark.parametrize(
        ("env", "missing"),
        [
            ({}, "SPACECAT_API_KEY"),
            ({"HELIX_ADMIN_TOKEN": "hx-token"}, "SPACECAT_API_KEY"),
            ({"SPACECAT_API_KEY": "sc-key"}, "HELIX_ADMIN_TOKEN"),
            (
                {"SPACECAT_API_KEY": "sc-key", "HELIX_ADMIN_TOKEN": "  "},
                "HELIX_ADMIN_TOKEN",
            ),
        ],
        ids=["none", "no-spacecat", "no-helix", "blank-helix"],
    )
    def test_missing_credential_names_variable(
        self, env: dict[str, str], missing: str
    ) -> None:
        """The error names the first missing variable."""
        with mock.patch.dict(os.environ, env, clear=True):
            with pytest.raises(MissingCredentialError) as exc_info:
                Credentials.from_env()

        assert exc_info.value.variable == missing
        assert str(exc_info.value) == f"{missing} environment variable is required"

    def test_credentials_are_frozen(self) -> None:
        """Credentials cannot be mutated after loading."""
        credentials = Credentials(spacecat_api_key="a", helix_admin_token="b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            credentials.spacecat_api_key = "c"  # type: ignore[misc]


class TestClientConfigs:
    """Tests for the per-service client configuration."""

    def test_defaults(self) -> None:
        """Default endpoints point at the production services."""
        credentials = Credentials(spacecat_api_key="a", helix_admin_token="b")
        with mock.patch.dict(os.environ, {}, clear=True):
            spacecat = SpaceCatConfig.from_credentials(credentials)
            helix = HelixAdminConfig.from_credentials(credentials)

        assert spacecat.endpoint == "https://spacecat.experiencecloud.live/api/v1"
        assert spacecat.api_key == "a"
        assert spacecat.timeout_s == 20.0
        assert helix.endpoint == "https://admin.hlx.page"
        assert helix.token == "b"

    def test_endpoint_overrides(self) -> None:
        """Endpoint environment variables override the defaults."""
        credentials = Credentials(spacecat_api_key="a", helix_admin_token="b")
        env = {
            "FIXWATCH_SPACECAT_ENDPOINT": "http://localhost:9000/api",
            "FIXWATCH_HELIX_ADMIN_ENDPOINT": "http://localhost:9001",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            spacecat = SpaceCatConfig.from_credentials(credentials)
            helix = HelixAdminConfig.from_credentials(credentials)

        assert spacecat.endpoint == "http://localhost:9000/api"
        assert helix.endpoint == "http://localhost:9001"


class TestVerificationTarget:
    """Tests for VerificationTarget."""

    def test_explicit_values_win_over_environment(self) -> None:
        """Explicit identifiers take precedence."""
        env = {"FIXWATCH_SITE_ID": "env-site", "FIXWATCH_OPPORTUNITY_ID": "env-opp"}
        with mock.patch.dict(os.environ, env, clear=True):
            target = VerificationTarget.resolve(site_id="s", opportunity_id="o")

        assert target == VerificationTarget(site_id="s", opportunity_id="o")
        assert target.delay_s == DEFAULT_DELAY_S

    def test_falls_back_to_environment(self) -> None:
        """Identifiers are read from the environment when not given."""
        env = {"FIXWATCH_SITE_ID": "env-site", "FIXWATCH_OPPORTUNITY_ID": "env-opp"}
        with mock.patch.dict(os.environ, env, clear=True):
            target = VerificationTarget.resolve()

        assert target.site_id == "env-site"
        assert target.opportunity_id == "env-opp"

    def test_missing_identifier_raises(self) -> None:
        """A target without an opportunity id is rejected."""
        with mock.patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigurationError, match="opportunity id"):
                VerificationTarget.resolve(site_id="s")

    def test_negative_delay_raises(self) -> None:
        """Negative delays are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            VerificationTarget(site_id="s", opportunity_id="o", delay_s=-1.0)
