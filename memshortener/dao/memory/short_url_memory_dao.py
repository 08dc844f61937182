"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a process-local implementation of ShortURLBaseDAO. Mappings
live in a plain dictionary guarded by a reader/writer lock and are lost when
the process exits.

Responsibilities:
    - Generate shortcodes and store shortcode -> target URL mappings;
    - Resolve shortcodes back to target URLs;
    - Keep the mapping consistent under concurrent access from request threads.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving short URLs in process memory.

Example:
    >>> from memshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> shortcode = dao.save("https://example.com/page")
    >>> len(shortcode)
    8
    >>> dao.get(shortcode)
    'https://example.com/page'
    >>> dao.get("nonexistent")
    Traceback (most recent call last):
        ...
    memshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'nonexistent' not found.
"""

import logging
import secrets
from collections.abc import Callable

from beartype import beartype

from memshortener.constants import Shortcode
from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory.locks import ReadWriteLock
from memshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from memshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    Reads take the lock in shared mode, so concurrent get() calls don't
    serialize. Writes take it exclusively for a single dictionary insert.
    Shortcode generation happens before the lock is taken.

    Attributes:
        random_source (Callable[[int], bytes]):
            Source of random bytes for shortcode generation.
        max_attempts (int):
            Number of shortcodes drawn before giving up on a colliding insert.

    Methods:
        save(target_url: str, **kwargs) -> str:
            Store a target URL under a fresh shortcode.
            Raises ShortcodeGenerationError when the random source fails.
            Raises ShortURLAlreadyExistsError when every drawn shortcode is taken.

        get(shortcode: str, **kwargs) -> str:
            Resolve a shortcode to its target URL.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        count(**kwargs) -> int:
            Number of stored mappings.
    """

    def __init__(
        self,
        random_source: Callable[[int], bytes] = secrets.token_bytes,
        max_attempts: int = Shortcode.MAX_ATTEMPTS,
    ):
        """Initialize an empty in-memory short URL store

        Args:
            random_source (Callable[[int], bytes]):
                Source of random bytes. Defaults to secrets.token_bytes.

            max_attempts (int):
                Shortcodes to draw per save() before raising
                ShortURLAlreadyExistsError. Defaults to 3.

        Raises:
            ValueError:
                If max_attempts is smaller than 1.
        """
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be at least 1 (given value: {max_attempts}).')

        self.random_source = random_source
        self.max_attempts = max_attempts
        self._urls: dict[str, str] = {}
        self._lock = ReadWriteLock()

    @beartype
    def save(self, target_url: str, **kwargs) -> str:
        """Store a target URL under a newly generated shortcode

        Args:
            target_url (str):
                Original URL. Stored verbatim.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str: The new 8-character shortcode.

        Raises:
            ShortcodeGenerationError:
                If the random source fails. Nothing is stored.
            ShortURLAlreadyExistsError:
                If all `max_attempts` drawn shortcodes were already taken.
                Nothing is stored and no existing entry is overwritten.

        Example:
            >>> dao.save('https://example.com')
            'Gh71WPTa'
        """
        for attempt in range(1, self.max_attempts + 1):
            shortcode = generate_shortcode(random_source=self.random_source)

            with self._lock.write_lock():
                if shortcode not in self._urls:
                    self._urls[shortcode] = target_url
                    break

            logger.warning(
                'Shortcode collision. Drawing a new shortcode.',
                extra={'shortcode': shortcode, 'attempt': attempt},
            )
        else:
            raise ShortURLAlreadyExistsError(f'Failed to draw an unused shortcode after {self.max_attempts} attempts.')

        logger.debug('Stored short URL.', extra={'shortcode': shortcode})
        return shortcode

    @beartype
    def get(self, shortcode: str, **kwargs) -> str:
        """Retrieve the target URL stored under a shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str: The stored target URL.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown to this store.

        Example:
            >>> dao.get('Gh71WPTa')
            'https://example.com'
        """
        with self._lock.read_lock():
            target_url = self._urls.get(shortcode)

        if target_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return target_url

    def count(self, **kwargs) -> int:
        """Return the number of stored mappings

        Example:
            >>> dao.count()
            42
        """
        with self._lock.read_lock():
            return len(self._urls)

    def __len__(self) -> int:
        return self.count()
