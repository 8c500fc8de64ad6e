"""Application-specific exceptions.

Every exception carries a stable `error_code` so that outer adapters (HTTP
handlers, CLIs) can map failures to responses without parsing messages.

Classes:
    ShortenerError:
        Base class for all application-specific errors.

    InvalidURLError:
        Raised when a URL submitted for shortening is blank, malformed,
        or lacks a scheme or host.

    ShortURLNotFoundError:
        Raised when a shortcode has no corresponding record.

    ConfigurationError, MissingEnvironmentVariableError, BadConfigurationError:
        Raised when the application is misconfigured.

    InternalError, ShortcodeSpaceExhaustedError:
        Raised on unrecoverable internal conditions.

Example:
    >>> from urlshortener.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc1234' not found.")
    Traceback (most recent call last):
        ...
    urlshortener.exceptions.ShortURLNotFoundError: Short URL with code 'abc1234' not found.
"""


class ShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortener_error'


class InvalidURLError(ShortenerError):
    """Raised when a URL cannot be shortened (blank, malformed, missing scheme or host)."""

    error_code = 'app:invalid_url_error'


class ShortURLNotFoundError(ShortenerError):
    """Raised when no short URL record exists for a shortcode."""

    error_code = 'app:short_url_not_found_error'


class ConfigurationError(ShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class InternalError(ShortenerError):
    """Base exception for unrecoverable internal failures."""

    error_code = 'internal:internal_error'


class ShortcodeSpaceExhaustedError(InternalError):
    """Raised when no unused shortcode could be drawn within the attempt cap."""

    error_code = 'internal:shortcode_space_exhausted_error'
