import psycopg
from psycopg.rows import dict_row

from courier.cache.base import BaseThingService
from courier.cache.exceptions import ThingServiceError
from courier.cache.models import Found, LookupResult, NotFound, Thing
from courier.database.connection import get_connection, pool_initialized
from courier.logging.logger import Log


class PostgresThingService(BaseThingService):
    """Reads things from the things table."""

    def try_read(self, key: str) -> LookupResult:
        if not pool_initialized():
            Log.warning(f"Thing {key!r} requested before the connection pool was opened")
            raise ThingServiceError(
                "Connection pool not initialized. Call init_pool() first."
            )
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        "SELECT id, attributes FROM things WHERE id = %s",
                        (key,),
                    )
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise ThingServiceError(f"Failed to read thing {key!r}: {exc}") from exc

        if row is None:
            return NotFound(key=key)

        return Found(
            value=Thing(id=str(row["id"]), attributes=dict(row["attributes"] or {}))
        )
