from datetime import datetime

import pytest

from courier.sender.models import Document, RawFile


@pytest.fixture()
def now() -> datetime:
    """Fixed point in time used as the sender clock."""
    return datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture()
def make_document(now: datetime):
    """Build a Document with sensible defaults."""

    def _make(
        format: str = "4.0",
        created: datetime | None = None,
        content: bytes = b"report body",
        name: str = "temp.file",
    ) -> Document:
        return Document(
            name=name,
            content=content,
            created=created if created is not None else now,
            format=format,
        )

    return _make


@pytest.fixture()
def make_file():
    """Build a RawFile; each call yields a distinct object."""

    def _make(name: str = "temp.file", content: bytes = b"raw bytes") -> RawFile:
        return RawFile(name=name, content=content)

    return _make
