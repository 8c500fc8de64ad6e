"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a process-local implementation of ShortURLBaseDAO backed by
two dictionaries: one keyed by shortcode and one keyed by original (target) URL.
State lives for the lifetime of the DAO instance only.

Responsibilities:
    - Insert and retrieve short URLs by shortcode or by target URL;
    - Claim free shortcodes atomically;
    - Answer shortcode membership checks in O(1);
    - Provide consistent snapshots of all stored records.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Example:
    >>> from datetime import datetime, UTC
    >>> from urlshortener.models import ShortURLModel
    >>> from urlshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> short_url = ShortURLModel(
    ...     shortcode="abc1234",
    ...     target="https://example.com/page",
    ...     domain="example.com",
    ...     created_at=datetime.now(UTC),
    ... )
    >>> dao.insert(short_url)
    <ShortURLMemoryDAO>
    >>> dao.exists("abc1234")
    True
    >>> dao.count()
    1
"""

import threading

from beartype import beartype

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    Attributes:
        _by_shortcode (dict[str, ShortURLModel]):
            Records keyed by shortcode. Preserves insertion order.
        _by_target (dict[str, ShortURLModel]):
            Records keyed by original URL.
        _lock (threading.Lock):
            Guards mutations of both dictionaries and full snapshots.

    NOTE:
        Writers publish fully constructed (frozen) ShortURLModel instances
        under a single lock. Single key lookups read the dictionaries without
        locking: they see either no record or a complete one.
    """

    def __init__(self):
        self._by_shortcode: dict[str, ShortURLModel] = {}
        self._by_target: dict[str, ShortURLModel] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a short URL mapping under its shortcode and target

        Both keys are written inside the same critical section, so concurrent
        writers never interleave between the two dictionaries.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMemoryDAO: self (for method chaining)
        """
        with self._lock:
            self._by_shortcode[short_url.shortcode] = short_url
            self._by_target[short_url.target] = short_url
        return self

    @beartype
    def insert_if_absent(self, short_url: ShortURLModel, **kwargs) -> bool:
        """Insert a short URL mapping only if its shortcode is free

        Returns:
            bool: True if the record was stored, False if the shortcode was taken.
        """
        with self._lock:
            if short_url.shortcode in self._by_shortcode:
                return False
            self._by_shortcode[short_url.shortcode] = short_url
            self._by_target[short_url.target] = short_url
        return True

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel | None:
        return self._by_shortcode.get(shortcode)

    @beartype
    def get_by_target(self, target: str, **kwargs) -> ShortURLModel | None:
        return self._by_target.get(target)

    @beartype
    def exists(self, shortcode: str, **kwargs) -> bool:
        return shortcode in self._by_shortcode

    @beartype
    def all(self, **kwargs) -> list[ShortURLModel]:
        """Return a snapshot of every stored record in insertion order

        The snapshot is taken under the write lock, so it is never torn by a
        concurrent insert. Later inserts do not affect a returned snapshot.

        Returns:
            list[ShortURLModel]:
                Copy of all records, oldest first.
        """
        with self._lock:
            return list(self._by_shortcode.values())

    @beartype
    def count(self, **kwargs) -> int:
        with self._lock:
            return len(self._by_shortcode)
