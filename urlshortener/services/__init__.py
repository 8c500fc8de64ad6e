from urlshortener.services.shortener_service import ShortenerService


__all__ = [
    'ShortenerService',
]
