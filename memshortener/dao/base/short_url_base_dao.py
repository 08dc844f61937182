"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for saving target URLs and resolving shortcodes.
    - Standardize error handling across data store implementations.
    - Enforce a consistent API for use by the HTTP handlers.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from memshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()
        >>> shortcode = dao.save("https://example.com/blog/article-123")
        >>> shortcode
        'q1Fz8_Jk'

        >>> dao.get(shortcode)
        'https://example.com/blog/article-123'
"""

from abc import ABC, abstractmethod


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        save(target_url: str, **kwargs) -> str:
            Generate a shortcode, store the mapping and return the shortcode.
            Raises ShortcodeGenerationError if the random source fails.
            Raises ShortURLAlreadyExistsError if no unused shortcode could be drawn.

        get(shortcode: str, **kwargs) -> str:
            Resolve a shortcode to its target URL.
            Raises ShortURLNotFoundError if the entry does not exist.

        count(**kwargs) -> int:
            Return the number of stored mappings.

    NOTE:
        - Mappings are immutable once saved. The DAO does not provide an
          interface to update or delete entries.
    """

    @abstractmethod
    def save(self, target_url: str, **kwargs) -> str:
        """Store a target URL under a newly generated shortcode.

        Args:
            target_url (str):
                The original URL. Stored as-is, without validation.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: The newly generated shortcode.

        Raises:
            ShortcodeGenerationError:
                If the random source fails to produce bytes.

            ShortURLAlreadyExistsError:
                If every drawn shortcode was already taken.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> str:
        """Resolve a shortcode to its target URL.

        Args:
            shortcode (str):
                The shortcode returned by a previous save().

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: The stored target URL.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given shortcode exists.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored mappings.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: Number of stored mappings.
        """
        pass
