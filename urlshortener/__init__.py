"""In-memory URL shortener.

Shortens URLs to 7-character codes, resolves codes back to the original URLs
and ranks the most frequently shortened domains.

Example:
    >>> from urlshortener import create_service
    >>> service = create_service()
    >>> service.shorten('https://www.youtube.com/watch?v=abc')
    'http://localhost:8080/Xy7pQ2a'
"""

from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.services import ShortenerService
from urlshortener.utils.config import ShortenerConfig, load_config


__all__ = [
    'ShortenerService',
    'create_service',
]


def create_service(config: ShortenerConfig | None = None) -> ShortenerService:
    """Build a ShortenerService backed by a fresh in-memory data store

    Args:
        config (ShortenerConfig | None):
            Shortener configuration. Loaded from the environment when omitted.

    Returns:
        ShortenerService: service owning its own ShortURLMemoryDAO.
    """
    config = config or load_config()
    return ShortenerService(ShortURLMemoryDAO(), base_url=config.base_url)
