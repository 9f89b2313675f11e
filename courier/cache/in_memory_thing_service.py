from courier.cache.base import BaseThingService
from courier.cache.models import Found, LookupResult, NotFound, Thing


class InMemoryThingService(BaseThingService):
    """Dict-backed thing service for local development and tests."""

    def __init__(self, things: dict[str, Thing] | None = None) -> None:
        self._things = dict(things or {})

    def try_read(self, key: str) -> LookupResult:
        thing = self._things.get(key)
        if thing is None:
            return NotFound(key=key)
        return Found(value=thing)
