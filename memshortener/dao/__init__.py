from memshortener.dao.exceptions import (
    DAOError,
    ShortURLNotFoundError,
    ShortURLAlreadyExistsError,
    ShortcodeGenerationError,
)


__all__ = [
    'DAOError',
    'ShortURLNotFoundError',
    'ShortURLAlreadyExistsError',
    'ShortcodeGenerationError',
]
