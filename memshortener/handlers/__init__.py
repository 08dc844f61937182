from flask import current_app

from memshortener.dao.base import ShortURLBaseDAO
from memshortener.handlers.constants import SHORT_URL_DAO_EXTENSION


def current_short_url_dao() -> ShortURLBaseDAO:
    """Return the short URL DAO injected into the running Flask app"""
    return current_app.extensions[SHORT_URL_DAO_EXTENSION]


__all__ = [
    'current_short_url_dao',
]
