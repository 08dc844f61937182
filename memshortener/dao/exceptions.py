"""Exceptions related to Data Access Objects (DAO) operations.

Callers tell failures apart by exception class, never by message text.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a shortcode has no stored target URL.

    ShortURLAlreadyExistsError:
        Raised when every freshly drawn shortcode is already taken.

    ShortcodeGenerationError:
        Raised when the random source can't produce the bytes for a shortcode.

Example:
    >>> from memshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    memshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a short URL is not found in the data store."""

    pass


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when no unused shortcode could be drawn for a new short URL."""

    pass


class ShortcodeGenerationError(DAOError):
    """Exception raised when the random source fails to produce shortcode bytes.

    This is an infrastructure fault, not a client error.
    """

    pass
