"""Store abstraction consumed by the lookup gateway."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import TranslationResult


class TranslationStore(ABC):
    """
    Key-value store for translation results.

    Contract: a value returned by ``get`` is fresh. Implementations are
    responsible for expiring entries ``ttl_seconds`` after ``set`` and for
    being safe under concurrent access.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[TranslationResult]:
        """Return the cached result for ``key``, or None on miss or expiry."""

    @abstractmethod
    async def set(self, key: str, value: TranslationResult, ttl_seconds: int) -> bool:
        """Store or overwrite ``key``. Returns False if the write did not happen."""

    async def health_check(self) -> bool:
        return True
