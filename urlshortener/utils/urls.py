"""URL helpers used when shortening and presenting links.

Functions:
    parse_url(url: str) -> SplitResult
        Validate a URL and split it into components.
    url_host(components: SplitResult) -> str
        Extract the host of a split URL, preserving its case.
    extract_domain(url: str) -> str
        Compute the metrics grouping domain of a URL.
    get_short_url(shortcode: str, base_url: str) -> str
        Get string representation of short URL for a given shortcode.

Example:
    >>> from urlshortener.utils.urls import extract_domain, get_short_url
    >>> extract_domain('https://www.youtube.com/watch?v=abc')
    'youtube.com'
    >>> get_short_url('abC1234', 'http://localhost:8080')
    'http://localhost:8080/abC1234'
"""

import re
import urllib.parse

from urlshortener.exceptions import InvalidURLError
from urlshortener.utils.constants import WWW_PREFIX


# Whitespace, control characters and ASCII characters that may never appear
# unescaped in a URI (RFC 3986, section 2)
_ILLEGAL_CHARACTERS = re.compile(r'[\x00-\x20\x7f"<>\\^`{|}]')
_MALFORMED_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')
# Square brackets are only allowed around an IP literal host
_BRACKETS = re.compile(r'[\[\]]')
# Registered name: unreserved characters, percent escapes and sub-delims (RFC 3986, section 3.2.2)
_REG_NAME = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")
_PORT = re.compile(r'(?::[0-9]*)?')


def parse_url(url: str) -> urllib.parse.SplitResult:
    """Validate a URL and split it into components

    A URL is accepted when it is non-blank, syntactically valid and carries
    both a scheme and a host.

    Args:
        url (str): URL to validate.

    Returns:
        SplitResult: components of the URL.

    Raises:
        InvalidURLError:
            If the URL is blank, malformed or lacks a scheme or host.
            The message names the failed rule and echoes the URL.

    Example:
        >>> parse_url('https://example.com/a?b=c').netloc
        'example.com'
        >>> parse_url('example.com')
        Traceback (most recent call last):
            ...
        urlshortener.exceptions.InvalidURLError: URL must include a scheme and host: example.com
    """
    if not url or not url.strip():
        raise InvalidURLError(f'URL must not be blank (given value: {url!r}).')

    if match := _ILLEGAL_CHARACTERS.search(url):
        raise InvalidURLError(f'Malformed URL (illegal character {match.group()!r} at index {match.start()}): {url}')
    if match := _MALFORMED_ESCAPE.search(url):
        raise InvalidURLError(f'Malformed URL (bad percent escape at index {match.start()}): {url}')

    try:
        components = urllib.parse.urlsplit(url)
        # Accessing the port validates it (non-numeric or out of range ports raise)
        _ = components.port
    except ValueError as e:
        raise InvalidURLError(f'Malformed URL ({e}): {url}') from e

    if '#' in components.fragment:
        raise InvalidURLError(f"Malformed URL (unescaped '#' in fragment): {url}")
    _check_brackets(url, components)

    host = url_host(components)
    if not components.scheme or not host:
        raise InvalidURLError(f'URL must include a scheme and host: {url}')
    if not host.startswith('[') and not _REG_NAME.fullmatch(host):
        raise InvalidURLError(f'Malformed URL (illegal character in host {host!r}): {url}')

    return components


def _check_brackets(url: str, components: urllib.parse.SplitResult) -> None:
    userinfo, _, hostinfo = components.netloc.rpartition('@')
    if hostinfo.startswith('['):
        hostinfo = hostinfo.partition(']')[2]
        if not _PORT.fullmatch(hostinfo):
            raise InvalidURLError(f'Malformed URL (unexpected text after IP literal {hostinfo!r}): {url}')

    for part in (userinfo, hostinfo, components.path, components.query, components.fragment):
        if _BRACKETS.search(part):
            raise InvalidURLError(f'Malformed URL (square brackets outside an IP literal host): {url}')


def url_host(components: urllib.parse.SplitResult) -> str:
    """Extract the host of a split URL

    Unlike `SplitResult.hostname`, the host is returned with its original
    case. IPv6 literals keep their square brackets.

    Args:
        components (SplitResult): split URL.

    Returns:
        str: host, or an empty string when the URL has no authority.

    Example:
        >>> url_host(urllib.parse.urlsplit('https://user@WWW.Example.com:8443/x'))
        'WWW.Example.com'
    """
    hostinfo = components.netloc.rpartition('@')[2]
    if hostinfo.startswith('['):
        host, bracket, _ = hostinfo.partition(']')
        return host + bracket
    return hostinfo.partition(':')[0]


def extract_domain(url: str) -> str:
    """Compute the grouping domain of a URL

    The domain is the URL's host with exactly one leading "www." removed.
    No other normalization happens, e.g. "WWW.example.com" is kept as is.

    Args:
        url (str): URL to extract the domain from.

    Returns:
        str: domain used to group short URLs in metrics.

    Raises:
        InvalidURLError: If the URL is not valid (see parse_url()).

    Example:
        >>> extract_domain('https://www.youtube.com/x')
        'youtube.com'
        >>> extract_domain('https://youtube.com/y')
        'youtube.com'
    """
    host = url_host(parse_url(url))
    return host.removeprefix(WWW_PREFIX)


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    The base URL is used verbatim. It is expected not to end with a slash.

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL of the shortener

    Returns:
        str: short url string representation
    """
    return f'{base_url}/{shortcode}'
