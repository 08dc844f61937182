"""Helper utilities for HTTP handlers.

Functions:
    base_url() -> str
        Resolve the public base URL for generated short URLs
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    running_locally() -> bool
        Check if the current app is configured for the local environment
    guarantee_500_response(func: Callable) -> Callable
        Decorator: Turn unexpected handler exceptions into a 500 response

Example:
    >>> from memshortener.utils.helpers import base_url
    >>> base_url(request, configured='https://sho.rt')
    'https://sho.rt'
    >>> base_url(request)   # request.host_url == 'http://127.0.0.1:8080/'
    'http://127.0.0.1:8080'
"""

import logging
import functools
from typing import Any
from collections.abc import Callable

from flask import current_app, jsonify

from memshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR, Defaults


logger = logging.getLogger(__name__)


def base_url(request: Any, configured: str | None = None) -> str:
    """Resolve public base URL for short URLs

    Prefers the configured base URL. Falls back to the host the client
    used to reach the service.

    Args:
        request (flask.Request): incoming request (only `host_url` is used)
        configured (str | None): configured BASE_URL, if any

    Returns:
        str: Base URL without trailing slash, e.g.:
             - "https://sho.rt"
             - "http://localhost:8080"
    """
    if configured:
        return configured.rstrip('/')
    return request.host_url.rstrip('/')


def get_short_url(shortcode: str, base: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base (str): public base URL

    Returns:
        str: short url string representation
    """
    return f'{base.rstrip("/")}/{shortcode}'


def running_locally() -> bool:
    """Check if the current Flask app runs in the local environment

    Reads the APP_ENV the app was created with, not the process
    environment. Must be called inside an application context.

    Returns:
        bool: True if running locally, False otherwise.
    """
    return current_app.config.get('APP_ENV', Defaults.APP_ENV).lower() == 'local'


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with 500 instead of propagating unexpected errors

    When the app runs locally the exception is re-raised so the debugger
    and the werkzeug traceback page still see it.

    Args:
        func (Callable): Flask view function.

    Returns:
        Callable: Wrapped view function.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception:
            logger.exception(
                'Unhandled exception in request handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            if running_locally():
                raise
            response = jsonify({'message': 'Internal Server Error', 'errorCode': UNKNOWN_INTERNAL_SERVER_ERROR})
            response.status_code = 500
            return response

    return wrapper
