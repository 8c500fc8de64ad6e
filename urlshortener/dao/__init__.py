from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.memory import ShortURLMemoryDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
]
