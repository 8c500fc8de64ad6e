"""URL shortening engine

This module holds the business logic of the shortener on top of a
ShortURLBaseDAO implementation.

Responsibilities:
    - Validate URLs submitted for shortening;
    - Shorten URLs idempotently (one record per exact original URL);
    - Draw collision-free shortcodes;
    - Resolve shortcodes back to original URLs;
    - Rank domains by number of shortened URLs.

Classes:
    ShortenerService:
        Shorten, resolve and rank URLs using an injected DAO.

Example:
    >>> from urlshortener.dao.memory import ShortURLMemoryDAO
    >>> from urlshortener.services import ShortenerService

    >>> service = ShortenerService(ShortURLMemoryDAO(), base_url='http://localhost:8080')
    >>> short_url = service.shorten('https://www.youtube.com/watch?v=abc')
    >>> short_url
    'http://localhost:8080/Xy7pQ2a'
    >>> service.resolve('Xy7pQ2a')
    'https://www.youtube.com/watch?v=abc'
    >>> service.top_domains(5)
    {'youtube.com': 1}
"""

import logging
from collections import Counter
from datetime import datetime, UTC

from beartype import beartype

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.exceptions import InvalidURLError, ShortURLNotFoundError, ShortcodeSpaceExhaustedError
from urlshortener.utils.urls import parse_url, extract_domain, get_short_url
from urlshortener.utils.shortener import generate_shortcode
from urlshortener.utils.constants import MAX_SHORTCODE_ATTEMPTS
from urlshortener.services.constants import (
    SHORT_URL_CREATED,
    SHORT_URL_REUSED,
    SHORTCODE_COLLISION,
    SHORT_URL_RESOLVED,
    SHORT_URL_NOT_FOUND,
    INVALID_URL,
    SHORTCODE_SPACE_EXHAUSTED,
)


logger = logging.getLogger(__name__)


class ShortenerService:
    """Shorten URLs, resolve shortcodes and compute domain metrics

    The service keeps no record state of its own: every record lives in the
    injected DAO. All methods are safe to call concurrently as long as the
    DAO is.

    Attributes:
        dao (ShortURLBaseDAO):
            Data store holding ShortURLModel records.
        base_url (str):
            Public prefix of short URLs, used verbatim (no trailing slash).
        max_attempts (int):
            Maximum number of shortcode draws per shorten() call.

    Methods:
        shorten(url: str) -> str:
            Return the short URL of `url`, creating a record on first use.
            Raises InvalidURLError for blank, malformed, schemeless or hostless URLs.

        resolve(shortcode: str) -> str:
            Return the original URL of `shortcode`.
            Raises ShortURLNotFoundError when the shortcode is unknown.

        top_domains(limit: int) -> dict[str, int]:
            Return up to `limit` domains with the most shortened URLs.

    NOTE:
        - shorten() checks for an existing record and inserts a new one in two
          separate DAO calls. Two concurrent first-time calls for the same URL
          may therefore both create a record. The DAO keeps the last one under
          the URL key, while both shortcodes keep resolving.
    """

    def __init__(self, dao: ShortURLBaseDAO, base_url: str, max_attempts: int = MAX_SHORTCODE_ATTEMPTS):
        self.dao = dao
        self.base_url = base_url
        self.max_attempts = max_attempts

    @beartype
    def shorten(self, url: str) -> str:
        """Shorten a URL

        Repeated calls with the exact same URL string return the same short
        URL. URLs are compared verbatim, so e.g. 'https://a.com' and
        'https://a.com/' produce two different short URLs.

        Args:
            url (str):
                Original URL to shorten. Must include a scheme and host.

        Returns:
            str: short URL as '{base_url}/{shortcode}'.

        Raises:
            InvalidURLError:
                If the URL is blank, malformed or lacks a scheme or host.
            ShortcodeSpaceExhaustedError:
                If no free shortcode was found within `max_attempts` draws.

        Example:
            >>> service.shorten('https://example.com/page')
            'http://localhost:8080/q7ZkP0a'
            >>> service.shorten('https://example.com/page')
            'http://localhost:8080/q7ZkP0a'
        """
        try:
            parse_url(url)
        except InvalidURLError as e:
            logger.info('Rejected URL: %s', e, extra={'event': INVALID_URL})
            raise

        existing = self.dao.get_by_target(url)
        if existing is not None:
            logger.debug(
                'URL already shortened. Reusing existing short URL.',
                extra={'shortcode': existing.shortcode, 'event': SHORT_URL_REUSED},
            )
            return get_short_url(existing.shortcode, self.base_url)

        short_url = self._insert_with_unique_shortcode(url)

        logger.info(
            'Created short URL.',
            extra={'shortcode': short_url.shortcode, 'domain': short_url.domain, 'event': SHORT_URL_CREATED},
        )
        return get_short_url(short_url.shortcode, self.base_url)

    @beartype
    def resolve(self, shortcode: str) -> str:
        """Resolve a shortcode to its original URL

        Args:
            shortcode (str):
                Exact (case-sensitive) shortcode.

        Returns:
            str: the original URL, exactly as it was shortened.

        Raises:
            ShortURLNotFoundError:
                If no record exists for the shortcode.

        Example:
            >>> service.resolve('q7ZkP0a')
            'https://example.com/page'
        """
        short_url = self.dao.get(shortcode)
        if short_url is None:
            logger.info('Short URL record not found.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        logger.debug('Resolved short URL.', extra={'shortcode': shortcode, 'event': SHORT_URL_RESOLVED})
        return short_url.target

    @beartype
    def top_domains(self, limit: int) -> dict[str, int]:
        """Rank domains by number of shortened URLs

        Every call scans all records held by the DAO. A domain's count is the
        number of distinct original URLs shortened under it.

        Ordering is by count, descending. Domains with equal counts keep the
        order in which their first record was stored (earliest first).

        Args:
            limit (int):
                Maximum number of domains to return. Values <= 0 yield an
                empty result.

        Returns:
            dict[str, int]: domain -> count, in ranking order.

        Example:
            >>> service.top_domains(2)
            {'youtube.com': 6, 'wikipedia.org': 4}
        """
        if limit <= 0:
            return {}

        # Counter keeps first-seen order and most_common() sorts stably,
        # so ties are broken by the DAO's insertion order.
        counts = Counter(short_url.domain for short_url in self.dao.all())
        return dict(counts.most_common(limit))

    def _insert_with_unique_shortcode(self, url: str) -> ShortURLModel:
        domain = extract_domain(url)
        created_at = datetime.now(UTC)

        for attempt in range(1, self.max_attempts + 1):
            short_url = ShortURLModel(shortcode=generate_shortcode(), target=url, domain=domain, created_at=created_at)
            # insert_if_absent() settles races between writers that drew the same free code
            if not self.dao.exists(short_url.shortcode) and self.dao.insert_if_absent(short_url):
                return short_url
            logger.debug('Shortcode collision. Drawing again.', extra={'attempt': attempt, 'event': SHORTCODE_COLLISION})

        logger.critical(
            'Could not draw an unused shortcode.',
            extra={'attempts': self.max_attempts, 'event': SHORTCODE_SPACE_EXHAUSTED},
        )
        raise ShortcodeSpaceExhaustedError(f'No unused shortcode found after {self.max_attempts} attempts.')
