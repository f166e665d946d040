"""Tests for HttpClientConfig and derive_transport_settings."""

from __future__ import annotations

import httpx
from pydantic import ValidationError
import pytest

from rocketchat.core.api.http.config import (
    LARGE_FILE_TIMEOUT_S,
    HttpClientConfig,
    derive_transport_settings,
)


class TestHttpClientConfig:
    """Test suite for HttpClientConfig."""

    def test_defaults(self):
        config = HttpClientConfig()

        assert config.timeout.read == 10.0
        assert config.timeout.connect == 10.0
        assert config.follow_redirects is True
        assert config.large_file_timeout_s == LARGE_FILE_TIMEOUT_S
        assert "x-auth-token" in config.redact_headers

    def test_empty_user_agent_rejected(self):
        with pytest.raises(ValidationError):
            HttpClientConfig(user_agent="  ")

    def test_frozen(self):
        config = HttpClientConfig()
        with pytest.raises(ValidationError):
            config.follow_redirects = False


class TestDeriveTransportSettings:
    """Test suite for derive_transport_settings."""

    def test_no_override_returns_shared_config(self):
        config = HttpClientConfig()
        assert derive_transport_settings(config) is config

    def test_large_file_extends_read_and_write(self):
        config = HttpClientConfig(timeout=httpx.Timeout(5.0, connect=2.0))

        derived = derive_transport_settings(config, large_file=True)

        assert derived.timeout.read == 90.0
        assert derived.timeout.write == 90.0
        assert derived.timeout.connect == 2.0
        assert derived.timeout.pool == 5.0
        assert derived.follow_redirects is True

    def test_disallow_redirects(self):
        config = HttpClientConfig()

        derived = derive_transport_settings(config, allow_redirects=False)

        assert derived.follow_redirects is False
        assert derived.timeout == config.timeout

    def test_both_overrides(self):
        derived = derive_transport_settings(
            HttpClientConfig(), large_file=True, allow_redirects=False
        )

        assert derived.follow_redirects is False
        assert derived.timeout.read == 90.0

    def test_shared_config_is_never_mutated(self):
        config = HttpClientConfig()

        derive_transport_settings(config, large_file=True, allow_redirects=False)

        assert config.timeout.read == 10.0
        assert config.follow_redirects is True

    def test_custom_large_file_timeout(self):
        config = HttpClientConfig(large_file_timeout_s=300.0)

        derived = derive_transport_settings(config, large_file=True)

        assert derived.timeout.read == 300.0
