"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env(), app_name() and base_url() correctly read environment variables.

2. Configuration loading behavior
   - Ensures load_config() returns a ShortenerConfig built from the environment.
   - Ensures BASE_URL is required outside of the local environment.
   - Ensures malformed base URLs raise BadConfigurationError.
"""

import pytest

from urlshortener.utils import config
from urlshortener.utils.config import ShortenerConfig
from urlshortener.exceptions import BadConfigurationError, ConfigurationError, MissingEnvironmentVariableError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Start every test from a clean environment."""
    for name in ('APP_ENV', 'APP_NAME', 'BASE_URL'):
        monkeypatch.delenv(name, raising=False)


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_app_env_defaults_to_local():
    """Ensure app_env() falls back to 'local'."""
    assert config.app_env() == 'local'


def test_app_env_is_lowercased(monkeypatch):
    """Ensure app_env() lowercases APP_ENV."""
    monkeypatch.setenv('APP_ENV', 'Prod')
    assert config.app_env() == 'prod'


def test_app_name(monkeypatch):
    """Ensure app_name() reads APP_NAME and returns None when unset."""
    assert config.app_name() is None
    monkeypatch.setenv('APP_NAME', 'urlshortener')
    assert config.app_name() == 'urlshortener'


def test_base_url_default_and_override(monkeypatch):
    """Ensure base_url() reads BASE_URL with a localhost fallback."""
    assert config.base_url() == 'http://localhost:8080'
    monkeypatch.setenv('BASE_URL', 'https://sho.rt')
    assert config.base_url() == 'https://sho.rt'


def test_base_url_treats_empty_value_as_unset(monkeypatch):
    """An empty BASE_URL falls back to the default."""
    monkeypatch.setenv('BASE_URL', '')
    assert config.base_url() == 'http://localhost:8080'


# -------------------------------
# 2. Configuration loading behavior
# -------------------------------


def test_load_config_defaults():
    """Ensure load_config() works without any environment in 'local'."""
    assert config.load_config() == ShortenerConfig(
        base_url='http://localhost:8080',
        app_env='local',
        app_name=None,
    )


def test_load_config_from_environment(monkeypatch):
    """Ensure load_config() picks up every configured variable."""
    monkeypatch.setenv('APP_ENV', 'dev')
    monkeypatch.setenv('APP_NAME', 'urlshortener')
    monkeypatch.setenv('BASE_URL', 'https://dev.sho.rt/s')

    loaded = config.load_config()

    assert loaded.base_url == 'https://dev.sho.rt/s'
    assert loaded.app_env == 'dev'
    assert loaded.app_name == 'urlshortener'


def test_load_config_requires_base_url_outside_local(monkeypatch):
    """Outside of 'local' BASE_URL must be set explicitly."""
    monkeypatch.setenv('APP_ENV', 'prod')

    with pytest.raises(MissingEnvironmentVariableError, match="'BASE_URL'"):
        config.load_config()


@pytest.mark.parametrize(
    'url, reason',
    [
        ('http://localhost:8080/', 'must not end with a slash'),
        ('localhost:8080', 'http or https scheme'),
        ('ftp://sho.rt', 'http or https scheme'),
        ('https://', 'must include a host'),
        ('https://sho.rt?x=1', 'must not include a query or fragment'),
        ('https://sho.rt#top', 'must not include a query or fragment'),
    ],
)
def test_load_config_rejects_bad_base_url(monkeypatch, url, reason):
    """Malformed base URLs raise BadConfigurationError."""
    monkeypatch.setenv('BASE_URL', url)

    with pytest.raises(BadConfigurationError, match=reason):
        config.load_config()


def test_configuration_errors_share_a_base_class():
    """Both configuration errors derive from ConfigurationError."""
    assert issubclass(MissingEnvironmentVariableError, ConfigurationError)
    assert issubclass(BadConfigurationError, ConfigurationError)
