from datetime import datetime, UTC
from collections.abc import Callable

import pytest

from urlshortener.models import ShortURLModel
from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.services import ShortenerService


@pytest.fixture
def base_url() -> str:
    return 'http://localhost:8080'


@pytest.fixture
def dao() -> ShortURLMemoryDAO:
    """Provide an empty in-memory DAO."""
    return ShortURLMemoryDAO()


@pytest.fixture
def service(dao, base_url) -> ShortenerService:
    """Provide a ShortenerService on top of an empty in-memory DAO."""
    return ShortenerService(dao, base_url=base_url)


@pytest.fixture
def make_short_url() -> Callable[..., ShortURLModel]:
    """Build ShortURLModel instances with sensible defaults."""

    def _make_short_url(
        shortcode: str = 'abC1234',
        target: str = 'https://example.com/page',
        domain: str = 'example.com',
        created_at: datetime = datetime(2026, 1, 1, tzinfo=UTC),
    ) -> ShortURLModel:
        return ShortURLModel(shortcode=shortcode, target=target, domain=domain, created_at=created_at)

    return _make_short_url
