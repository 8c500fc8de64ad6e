from urlshortener.utils.config import ShortenerConfig, app_env, app_name, base_url, load_config
from urlshortener.utils.urls import parse_url, url_host, extract_domain, get_short_url
from urlshortener.utils.shortener import generate_shortcode
from urlshortener.utils.logging import initialize_logging


__all__ = [
    'ShortenerConfig',
    'app_env',
    'app_name',
    'base_url',
    'load_config',
    'parse_url',
    'url_host',
    'extract_domain',
    'get_short_url',
    'generate_shortcode',
    'initialize_logging',
]
