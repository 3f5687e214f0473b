"""Tests for configuration classes."""

import logging
import os
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from config import (
    AppConfig,
    CORSConfig,
    LoggingConfig,
    RateLimitConfig,
    SecurityConfig,
    _parse_cors_origins,
    setup_logging,
)


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_default_origin(self):
        with patch.dict(os.environ, {}, clear=True):
            assert CORSConfig().allowed_origins == ["http://localhost:8000"]

    def test_parses_env_var(self):
        env = "http://example.com, http://localhost:3000 ,,http://app.test"
        with patch.dict(os.environ, {"CORS_ORIGINS": env}):
            assert _parse_cors_origins() == [
                "http://example.com",
                "http://localhost:3000",
                "http://app.test",
            ]

    def test_permissive_defaults(self):
        config = CORSConfig()
        assert config.allow_credentials is True
        assert "*" in config.allow_methods
        assert "*" in config.allow_headers


class TestRateLimitConfig:
    """Tests for RateLimitConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = RateLimitConfig()
            assert config.enabled is True
            assert config.requests_per_minute == 60

    def test_from_env(self):
        with patch.dict(os.environ, {"RATE_LIMIT_ENABLED": "false", "RATE_LIMIT_RPM": "120"}):
            config = RateLimitConfig()
            assert config.enabled is False
            assert config.requests_per_minute == 120

    @pytest.mark.parametrize("value,expected", [
        ("TRUE", True),
        ("True", True),
        ("false", False),
        ("0", False),
        ("no", False),
    ])
    def test_enabled_parsing(self, value, expected):
        with patch.dict(os.environ, {"RATE_LIMIT_ENABLED": value}):
            assert RateLimitConfig().enabled is expected


class TestSecurityConfig:
    """Tests for SecurityConfig class."""

    def test_secret_key_generated_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert len(SecurityConfig().secret_key) > 0

    def test_secret_key_from_env(self):
        with patch.dict(os.environ, {"SECRET_KEY": "my-key"}):
            assert SecurityConfig().secret_key == "my-key"


class TestLoggingConfig:
    """Tests for LoggingConfig and setup_logging."""

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "INFO"

    def test_level_from_env_is_upper_cased(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"

    def test_setup_logging_applies_level(self):
        root = logging.getLogger()
        previous = root.level
        with patch("logging.basicConfig") as basic_config:
            setup_logging(LoggingConfig(level="WARNING"))
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert kwargs["format"] == LoggingConfig().format
        assert root.level == previous

    def test_unknown_level_falls_back_to_info(self):
        with patch("logging.basicConfig") as basic_config:
            setup_logging(LoggingConfig(level="CHATTY"))
        assert basic_config.call_args.kwargs["level"] == logging.INFO


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()
            assert config.debug is False
            assert config.host == "127.0.0.1"
            assert config.port == 8000
            assert config.session_ttl == 3600

    def test_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "true", "HOST": "0.0.0.0", "PORT": "9000"}):
            config = AppConfig()
            assert config.debug is True
            assert config.host == "0.0.0.0"
            assert config.port == 9000

    def test_nested_configs(self):
        config = AppConfig()
        assert isinstance(config.cors, CORSConfig)
        assert isinstance(config.rate_limit, RateLimitConfig)
        assert isinstance(config.security, SecurityConfig)
        assert isinstance(config.log, LoggingConfig)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            AppConfig().port = 1
