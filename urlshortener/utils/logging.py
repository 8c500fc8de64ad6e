"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at process start-up (before any
other logging is done), e.g. in the entrypoint of the hosting web server.

Logging format (LOG_FORMAT=json, the default):
{
    "timestamp": "2026-01-05T12:00:00.000Z",
    "level": "INFO",
    "logger": "urlshortener.services.shortener_service",
    "message": "Created short URL.",
    "shortcode": "abC1234"
}

Logging format (LOG_FORMAT=text):
2026-01-05T12:00:00.000Z INFO urlshortener.services.shortener_service: Created short URL. {"shortcode": "abC1234"}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from urlshortener.exceptions import BadConfigurationError
from urlshortener.utils.constants import ENV, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


STANDARD_ATTRS = frozenset(
    {
        'args',
        'asctime',
        'created',
        'exc_info',
        'exc_text',
        'filename',
        'funcName',
        'levelname',
        'levelno',
        'lineno',
        'module',
        'msecs',
        'message',
        'msg',
        'name',
        'pathname',
        'process',
        'processName',
        'relativeCreated',
        'stack_info',
        'thread',
        'threadName',
        'taskName',
    }
)


def _timestamp(record: logging.LogRecord) -> str:
    # fmt: off
    return datetime.fromtimestamp(record.created, tz=UTC) \
                   .isoformat(timespec='milliseconds') \
                   .replace('+00:00', 'Z')
    # fmt: on


def _extras(record: logging.LogRecord) -> dict:
    return {key: value for key, value in record.__dict__.items() if key not in STANDARD_ATTRS}


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': _timestamp(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update(_extras(record))

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


class TextFormatter(logging.Formatter):
    """Single line, human readable formatter that appends LogRecord extras as JSON"""

    def format(self, record: logging.LogRecord) -> str:
        line = f'{_timestamp(record)} {record.levelname} {record.name}: {record.getMessage()}'

        extras = _extras(record)
        if extras:
            line = f'{line} {json.dumps(extras, default=str)}'

        if record.exc_info:
            line = f'{line}\n{self.formatException(record.exc_info)}'

        return line


FORMATTERS = {
    'json': JsonFormatter,
    'text': TextFormatter,
}


def initialize_logging() -> None:
    log_level = os.getenv(ENV.Logging.LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    log_format = os.getenv(ENV.Logging.LOG_FORMAT, DEFAULT_LOG_FORMAT).lower()
    if log_format not in FORMATTERS:
        raise BadConfigurationError(f'Unsupported log format (given value: {log_format!r}; expected one of {sorted(FORMATTERS)}).')

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                log_format: {
                    '()': FORMATTERS[log_format],
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': log_format,
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
