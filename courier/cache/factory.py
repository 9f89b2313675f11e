from courier.cache.base import BaseThingService
from courier.cache.in_memory_thing_service import InMemoryThingService
from courier.cache.postgres_thing_service import PostgresThingService
from courier.cache.thing_cache import ThingCache
from courier.config.settings import Settings
from courier.database.connection import init_pool, pool_initialized
from courier.logging.logger import Log


class CacheFactory:
    """Creates a ThingCache over the configured thing service backend."""

    BACKENDS: dict[str, type[BaseThingService]] = {
        "memory": InMemoryThingService,
        "postgres": PostgresThingService,
    }

    @classmethod
    def create(cls, settings: Settings) -> ThingCache:
        """Create a ThingCache; the postgres backend opens the pool if needed."""
        Log.configure(settings.log_level)
        backend = settings.thing_service_backend.lower()
        service_cls = cls.BACKENDS.get(backend)
        if service_cls is None:
            raise ValueError(
                f"Unknown thing service backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        if service_cls is PostgresThingService and not pool_initialized():
            init_pool(settings)
            Log.info(f"Opened thing pool to {settings.db_host}:{settings.db_port}")
        return ThingCache(service_cls())
