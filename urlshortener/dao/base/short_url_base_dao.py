"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects
      by shortcode as well as by original (target) URL.
    - Provide O(1) shortcode membership checks used during shortcode generation.
    - Provide a full enumeration of stored records for metrics scans.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from datetime import datetime, UTC
        >>> from urlshortener.models import ShortURLModel
        >>> from urlshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = ShortURLModel(
        ...     shortcode="a1b2c3d",
        ...     target="https://example.com/blog/article-123",
        ...     domain="example.com",
        ...     created_at=datetime.now(UTC),
        ... )
        >>> dao.insert(short_url)
        <ShortURLMemoryDAO>

        >>> dao.get("a1b2c3d").target
        'https://example.com/blog/article-123'

        >>> dao.get_by_target("https://example.com/blog/article-123").shortcode
        'a1b2c3d'
"""

from abc import ABC, abstractmethod

from urlshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert (or overwrite) a ShortURLModel under its shortcode and target.

        insert_if_absent(short_url: ShortURLModel, **kwargs) -> bool:
            Insert a ShortURLModel only if its shortcode is not taken yet.

        get(shortcode: str, **kwargs) -> ShortURLModel | None:
            Retrieve a ShortURLModel by exact shortcode. None if absent.

        get_by_target(target: str, **kwargs) -> ShortURLModel | None:
            Retrieve a ShortURLModel by exact original URL. None if absent.

        exists(shortcode: str, **kwargs) -> bool:
            Check whether a shortcode is already taken.

        all(**kwargs) -> list[ShortURLModel]:
            Return every stored ShortURLModel.

        count(**kwargs) -> int:
            Return the number of stored ShortURLModel records.

    Subclassing:
        Datastore-specific implementations must extend this class and
        implement all abstract methods. All methods must be safe to call
        from multiple threads without external locking.

    NOTE:
        - Records are never updated or deleted through the DAO.
        - insert() performs no uniqueness checks. insert_if_absent() claims a
          shortcode atomically. Callers are responsible for one-record-per-target
          semantics.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a ShortURLModel into the data store.

        The record is stored under both its shortcode and its target URL.
        An existing record under either key is overwritten.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)
        """
        pass

    @abstractmethod
    def insert_if_absent(self, short_url: ShortURLModel, **kwargs) -> bool:
        """Insert a ShortURLModel unless its shortcode is already taken.

        The membership check and the write happen as one atomic step, so two
        concurrent callers can never both claim the same shortcode. A taken
        shortcode leaves the existing record untouched.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if the record was stored, False if the shortcode was taken.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel | None:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                Exact (case-sensitive) shortcode of the record.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel | None: The ShortURLModel instance if found, otherwise None.
        """
        pass

    @abstractmethod
    def get_by_target(self, target: str, **kwargs) -> ShortURLModel | None:
        """Retrieve a ShortURLModel from the data store by its original URL.

        The URL is matched verbatim: no trimming, case folding or other
        normalization is applied.

        Args:
            target (str):
                Original URL as it was submitted for shortening.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel | None: The ShortURLModel instance if found, otherwise None.
        """
        pass

    @abstractmethod
    def exists(self, shortcode: str, **kwargs) -> bool:
        """Check whether a record with the given shortcode exists.

        Args:
            shortcode (str):
                Exact (case-sensitive) shortcode to check.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if the shortcode is taken, False otherwise.
        """
        pass

    @abstractmethod
    def all(self, **kwargs) -> list[ShortURLModel]:
        """Return all stored ShortURLModel records.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            list[ShortURLModel]: Snapshot of stored records in insertion order.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored records.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: Number of distinct shortcodes in the data store.
        """
        pass
