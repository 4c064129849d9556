"""
Tests for environment-based Settings.
"""

import pytest

from wasend.core.config.settings import Settings

ENV_VARS = (
    "LOG_LEVEL",
    "LOG_DIR",
    "ENVIRONMENT",
    "API_VERSION",
    "BASE_URL",
    "REQUEST_TIMEOUT",
    "WP_ACCESS_TOKEN",
    "WP_PHONE_ID",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.environment == "DEV"
    assert settings.api_version == "v21.0"
    assert settings.base_url == "https://graph.facebook.com/"
    assert settings.request_timeout == 30.0
    assert settings.wp_access_token is None
    assert settings.is_development
    assert not settings.is_production


def test_values_from_environment(clean_env):
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("ENVIRONMENT", "prod")
    clean_env.setenv("API_VERSION", "v17.0")
    clean_env.setenv("REQUEST_TIMEOUT", "2.5")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.is_production
    assert settings.api_version == "v17.0"
    assert settings.request_timeout == 2.5


def test_unknown_environment_falls_back_to_dev(clean_env):
    clean_env.setenv("ENVIRONMENT", "staging")

    assert Settings().environment == "DEV"


def test_invalid_log_level(clean_env):
    clean_env.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings()


@pytest.mark.parametrize("timeout", ["0", "-1"])
def test_non_positive_timeout(clean_env, timeout):
    clean_env.setenv("REQUEST_TIMEOUT", timeout)

    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        Settings()


class TestRequireCredentials:
    def test_both_present(self, clean_env):
        clean_env.setenv("WP_ACCESS_TOKEN", "tok")
        clean_env.setenv("WP_PHONE_ID", "123")

        assert Settings().require_credentials() == ("tok", "123")

    def test_missing_token(self, clean_env):
        clean_env.setenv("WP_PHONE_ID", "123")

        with pytest.raises(ValueError, match="WP_ACCESS_TOKEN is required"):
            Settings().require_credentials()

    def test_missing_phone_id(self, clean_env):
        clean_env.setenv("WP_ACCESS_TOKEN", "tok")

        with pytest.raises(ValueError, match="WP_PHONE_ID is required"):
            Settings().require_credentials()

    def test_explicit_token_with_phone_id_from_env(self, clean_env):
        clean_env.setenv("WP_PHONE_ID", "123")

        assert Settings().require_credentials(access_token="explicit") == (
            "explicit",
            "123",
        )

    def test_explicit_values_win(self, clean_env):
        clean_env.setenv("WP_ACCESS_TOKEN", "tok")
        clean_env.setenv("WP_PHONE_ID", "123")

        assert Settings().require_credentials("other", "456") == ("other", "456")
