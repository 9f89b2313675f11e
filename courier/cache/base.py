from abc import ABC, abstractmethod

from courier.cache.models import LookupResult


class BaseThingService(ABC):
    """Contract for all thing lookup backends."""

    @abstractmethod
    def try_read(self, key: str) -> LookupResult:
        """Look a thing up by key.

        Returns:
            Found with the thing, or NotFound if the key does not resolve.

        Raises:
            ThingServiceError: if the backend fails (not for a missing key).
        """
