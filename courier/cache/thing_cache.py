from courier.cache.base import BaseThingService
from courier.cache.models import Found, Thing
from courier.logging.logger import Log


class ThingCache:
    """Read-through cache over a thing service.

    Resolved things are kept for the lifetime of the cache: no eviction, no
    refresh. Keys the service does not resolve are not remembered, so the next
    get for such a key queries the service again.
    """

    def __init__(self, service: BaseThingService) -> None:
        self._service = service
        self._things: dict[str, Thing] = {}

    def get(self, key: str) -> Thing | None:
        """Return the thing for key, querying the service only on a miss."""
        if key in self._things:
            return self._things[key]

        result = self._service.try_read(key)
        if isinstance(result, Found):
            self._things[key] = result.value
            Log.debug(f"Cached thing {key!r}")
            return result.value

        Log.debug(f"Thing {key!r} not found")
        return None

    def __contains__(self, key: object) -> bool:
        return key in self._things

    def __len__(self) -> int:
        return len(self._things)
