"""Shortcode generation utility

This module provides a helper function for drawing random, fixed-length,
Base62 shortcodes. Uniqueness is not guaranteed here: callers are expected
to check candidates against their data store and redraw on collision.

Functions:
    generate_shortcode(length=7, alphabet=SHORTCODE_ALPHABET):
        Draw a random shortcode suitable for use as a URL slug.

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q7ZkP0a'
"""

import secrets

from urlshortener.utils.constants import SHORTCODE_ALPHABET, SHORTCODE_LENGTH


def generate_shortcode(length: int = SHORTCODE_LENGTH, alphabet: str = SHORTCODE_ALPHABET) -> str:
    """Draw a random shortcode of the given length.

    Every character is drawn independently and uniformly from `alphabet`
    using the operating system's CSPRNG (`secrets`), so consecutive codes are
    not predictable from one another.

    Args:
        length (int, optional):
            Number of characters in the resulting code.
            Defaults to 7.

        alphabet (str, optional):
            Characters to draw from.
            Defaults to Base62: [a-zA-Z0-9].

    Returns:
        str: A random alphanumeric shortcode.

    Example:
        >>> code = generate_shortcode()
        >>> len(code)
        7

    NOTE:
        - With the default parameters the keyspace holds 62**7 (~3.5e12) codes.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not isinstance(alphabet, str):
        raise TypeError(f'Alphabet must be of type string (given type: {type(alphabet)}).')
    if not alphabet:
        raise ValueError(f'Alphabet must be a non-empty string (given value: {alphabet!r}).')

    return ''.join(secrets.choice(alphabet) for _ in range(length))
