"""Unit tests for the ShortURLModel dataclass in short_url_model.py.

This test suite verifies the integrity, immutability, and equality behavior
of the ShortURLModel, which represents a shortened URL mapping together with
its grouping domain and creation time.

Test coverage includes:

1. Model creation and field validation
   - Ensures instances can be created with valid field types and values.

2. Equality semantics
   - Confirms that models with identical data compare equal.

3. Inequality semantics
   - Ensures that differing field values produce non-equal instances.

4. Immutability
   - Verifies that all fields are frozen and cannot be reassigned after
     object creation.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, UTC

import pytest

from urlshortener.models.short_url_model import ShortURLModel


CREATED_AT = datetime(2026, 1, 1, 0, 0, 0, tzinfo=UTC)


# -------------------------------------------------
# 1. Model creation and field type validation
# -------------------------------------------------


def test_valid_short_url_model_creation():
    """Ensure ShortURLModel can be created with valid data and types."""
    short_url = ShortURLModel(
        shortcode='abC1234',
        target='https://www.example.com/article/123',
        domain='example.com',
        created_at=CREATED_AT,
    )

    assert isinstance(short_url, ShortURLModel)
    assert short_url.shortcode == 'abC1234'
    assert short_url.target == 'https://www.example.com/article/123'
    assert short_url.domain == 'example.com'
    assert isinstance(short_url.created_at, datetime)
    assert short_url.created_at == CREATED_AT


def test_all_fields_are_required():
    """Verify that a model cannot be created without a creation time."""
    with pytest.raises(TypeError):
        ShortURLModel(shortcode='abC1234', target='https://example.com', domain='example.com')


# -------------------------------------------------
# 2. Equality semantics
# -------------------------------------------------


def test_short_url_model_equality():
    """Models with identical data should compare equal."""
    short_url1 = ShortURLModel(
        shortcode='abC1234',
        target='https://example.com/article/123',
        domain='example.com',
        created_at=CREATED_AT,
    )
    short_url2 = ShortURLModel(
        shortcode='abC1234',
        target='https://example.com/article/123',
        domain='example.com',
        created_at=CREATED_AT,
    )

    assert short_url1 == short_url2
    assert hash(short_url1) == hash(short_url2)


# -------------------------------------------------
# 3. Inequality semantics
# -------------------------------------------------


@pytest.mark.parametrize(
    'field, value',
    [
        ('shortcode', 'xyZ9876'),
        ('target', 'https://example.com/article/456'),
        ('domain', 'other.com'),
        ('created_at', datetime(2027, 1, 1, 0, 0, 0, tzinfo=UTC)),
    ],
)
def test_short_url_model_inequality(field, value):
    """Models with differing data should not compare equal."""
    parameters = {
        'shortcode': 'abC1234',
        'target': 'https://example.com/article/123',
        'domain': 'example.com',
        'created_at': CREATED_AT,
    }
    left_url = ShortURLModel(**parameters)
    right_url = ShortURLModel(**{**parameters, field: value})

    assert left_url != right_url


# -------------------------------------------------
# 4. Immutability
# -------------------------------------------------


@pytest.mark.parametrize(
    'field, new_value',
    [
        ('shortcode', 'xyZ9876'),
        ('target', 'https://example.com/article/456'),
        ('domain', 'other.com'),
        ('created_at', datetime(2027, 1, 1, 0, 0, 0, tzinfo=UTC)),
    ],
)
def test_short_url_model_immutability(field, new_value):
    """Attempting to modify fields should raise FrozenInstanceError."""
    short_url = ShortURLModel(
        shortcode='abC1234',
        target='https://example.com/article/123',
        domain='example.com',
        created_at=CREATED_AT,
    )

    with pytest.raises(FrozenInstanceError):
        setattr(short_url, field, new_value)
