import string
from enum import StrEnum


# Shortcode alphabet: 26 lowercase + 26 uppercase + 10 digits
SHORTCODE_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
SHORTCODE_LENGTH = 7

# Upper bound on shortcode redraws before the keyspace is considered exhausted
MAX_SHORTCODE_ATTEMPTS = 1_000

# Prefix stripped from hosts when grouping records by domain
WWW_PREFIX = 'www.'

# Defaults for environment driven configuration
DEFAULT_BASE_URL = 'http://localhost:8080'
DEFAULT_APP_ENV = 'local'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_LOG_FORMAT = 'json'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        BASE_URL = 'BASE_URL'

    class Logging(StrEnum):
        LOG_LEVEL = 'LOG_LEVEL'
        LOG_FORMAT = 'LOG_FORMAT'
