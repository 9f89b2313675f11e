import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest
from psycopg.types.json import Jsonb

from courier.config.settings import Settings
from courier.database.connection import close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "courier_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS things (
                        id TEXT PRIMARY KEY,
                        attributes JSONB
                    )
                    """
                )
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def seed_thing(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    thing_id = f"thing-{uuid.uuid4()}"
    with db_conn.cursor() as cur:
        cur.execute(
            "INSERT INTO things (id, attributes) VALUES (%s, %s)",
            (thing_id, Jsonb({"color": "blue"})),
        )
    db_conn.commit()
    try:
        yield thing_id
    finally:
        with db_conn.cursor() as cur:
            cur.execute("DELETE FROM things WHERE id = %s", (thing_id,))
        db_conn.commit()
