from memshortener.dao.memory.locks import ReadWriteLock
from memshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO


__all__ = [
    'ReadWriteLock',
    'ShortURLMemoryDAO',
]
