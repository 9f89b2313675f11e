from courier.cache.base import BaseThingService
from courier.cache.factory import CacheFactory
from courier.cache.models import Found, LookupResult, NotFound, Thing
from courier.cache.thing_cache import ThingCache

__all__ = [
    "BaseThingService",
    "CacheFactory",
    "Found",
    "LookupResult",
    "NotFound",
    "Thing",
    "ThingCache",
]
