"""Utility functions for application configuration management.

Configuration is read from environment variables. Each value has a small
accessor function, and `load_config()` bundles the values the shortener needs
into an immutable `ShortenerConfig`.

Environment variables:
    APP_ENV     - application environment, 'local' by default.
    APP_NAME    - application name, optional.
    BASE_URL    - public prefix of short URLs, 'http://localhost:8080' by default.
                  Required outside of the 'local' environment.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    base_url() -> str
        Return the public base URL of short links (`BASE_URL`).

    load_config() -> ShortenerConfig
        Load and validate the shortener's configuration.

Example:
    >>> from urlshortener.utils.config import load_config
    >>> os.environ['BASE_URL'] = 'https://sho.rt'
    >>> load_config().base_url
    'https://sho.rt'
"""

import os
import logging
import urllib.parse
from dataclasses import dataclass

from urlshortener.exceptions import BadConfigurationError, MissingEnvironmentVariableError
from urlshortener.utils.constants import ENV, DEFAULT_APP_ENV, DEFAULT_BASE_URL


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortenerConfig:
    """Validated shortener configuration.

    Attributes:
        base_url (str):
            Public prefix of short URLs, without a trailing slash.
        app_env (str):
            Application environment name.
        app_name (str | None):
            Application name, if configured.
    """

    base_url: str = DEFAULT_BASE_URL
    app_env: str = DEFAULT_APP_ENV
    app_name: str | None = None


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'Dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, DEFAULT_APP_ENV).lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def base_url() -> str:
    """Return the public base URL of short links by reading 'BASE_URL'

    Returns:
        str:
            Value of `BASE_URL` environment variable, `'http://localhost:8080'` by default.
    """
    return os.environ.get(ENV.App.BASE_URL) or DEFAULT_BASE_URL


def _validate_base_url(url: str) -> str:
    components = urllib.parse.urlsplit(url)
    if components.scheme not in {'http', 'https'}:
        raise BadConfigurationError(f'Base URL must use the http or https scheme (given value: {url!r}).')
    if not components.netloc:
        raise BadConfigurationError(f'Base URL must include a host (given value: {url!r}).')
    if url.endswith('/'):
        raise BadConfigurationError(f'Base URL must not end with a slash (given value: {url!r}).')
    if components.query or components.fragment:
        raise BadConfigurationError(f'Base URL must not include a query or fragment (given value: {url!r}).')
    return url


def load_config() -> ShortenerConfig:
    """Load the shortener's configuration from environment variables

    Outside of the local environment `BASE_URL` must be set explicitly, since
    the localhost default would produce unusable short links.

    Returns:
        ShortenerConfig: validated configuration.

    Raises:
        MissingEnvironmentVariableError:
            If `BASE_URL` is missing or empty outside of the local environment.
        BadConfigurationError:
            If `BASE_URL` is not an absolute http(s) URL without a trailing slash.

    Example:
        >>> os.environ['APP_ENV'] = 'local'
        >>> load_config()
        ShortenerConfig(base_url='http://localhost:8080', app_env='local', app_name=None)
    """
    env = app_env()
    if env != DEFAULT_APP_ENV and not os.environ.get(ENV.App.BASE_URL):
        raise MissingEnvironmentVariableError(f"Missing required environment variables: '{ENV.App.BASE_URL}'")

    config = ShortenerConfig(
        base_url=_validate_base_url(base_url()),
        app_env=env,
        app_name=app_name(),
    )
    logger.debug('Loaded shortener configuration.', extra={'baseUrl': config.base_url, 'appEnv': config.app_env})
    return config
