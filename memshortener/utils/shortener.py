"""Shortcode generation utility

This module provides a helper function for generating short, random,
URL-safe identifiers from a cryptographically secure random source.

Functions:
    generate_shortcode(num_bytes=6, random_source=secrets.token_bytes):
        Generate a random shortcode suitable for use as a URL slug.

Example:
    >>> from memshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'Xk3_a9Qe'
"""

import base64
import secrets
from collections.abc import Callable

from memshortener.constants import Shortcode
from memshortener.dao.exceptions import ShortcodeGenerationError


ALPHABET = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_')


def generate_shortcode(
    num_bytes: int = Shortcode.NUM_BYTES,
    random_source: Callable[[int], bytes] = secrets.token_bytes,
) -> str:
    """Generate a random, URL-safe shortcode.

    Draws `num_bytes` bytes from `random_source` and encodes them with the
    URL-safe base64 alphabet, stripping '=' padding. Six bytes (48 bits)
    produce an 8-character shortcode drawn from [A-Za-z0-9-_].

    Args:
        num_bytes (int, optional):
            Number of random bytes to draw. Defaults to 6.

        random_source (Callable[[int], bytes], optional):
            Function returning the requested number of random bytes.
            Defaults to secrets.token_bytes.

    Returns:
        str: Unpadded URL-safe base64 encoding of the random bytes.

    Raises:
        ValueError:
            If num_bytes is not a positive integer.
        ShortcodeGenerationError:
            If the random source raises or returns the wrong number of bytes.

    Example:
        >>> generate_shortcode(random_source=lambda n: b'\\x00' * n)
        'AAAAAAAA'

    NOTE:
        - Collisions are not checked here. With 2^48 possible shortcodes they
          are negligible for modest store sizes; the store itself rejects
          a shortcode that is already taken.
    """
    if not isinstance(num_bytes, int) or num_bytes <= 0:
        raise ValueError(f'Number of bytes must be a positive integer (given value: {num_bytes!r}).')

    try:
        raw = random_source(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise ShortcodeGenerationError(f'Random source failed to produce {num_bytes} bytes.') from e

    if not isinstance(raw, bytes) or len(raw) != num_bytes:
        raise ShortcodeGenerationError(f'Random source returned malformed data (expected {num_bytes} bytes).')

    return base64.urlsafe_b64encode(raw).rstrip(b'=').decode('ascii')
