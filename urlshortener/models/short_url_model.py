from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        shortcode (str):
            The unique 7-character identifier representing the shortened URL.
        target (str):
            The original URL exactly as it was submitted for shortening.
        domain (str):
            Host of the target URL with a leading "www." stripped.
            Used as the grouping key for domain metrics.
        created_at (datetime):
            Moment (UTC) the mapping was created. Never changes afterwards.

    Example:
        >>> from datetime import datetime, UTC
        >>> url = ShortURLModel(
        ...     shortcode="abC1234",
        ...     target="https://www.example.com/article/123",
        ...     domain="example.com",
        ...     created_at=datetime.now(UTC),
        ... )
        >>> url.target
        'https://www.example.com/article/123'
        >>> url.domain
        'example.com'
    """

    shortcode: str
    target: str
    domain: str
    created_at: datetime
