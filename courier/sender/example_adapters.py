"""Example sender adapters.

Use this module as a reference when implementing real recognizer, signing,
or transport adapters. Implement the matching base class and register the
set in SenderFactory.
"""

from datetime import datetime
from typing import ClassVar

from courier.logging.logger import Log
from courier.sender.base import BaseCryptographer, BaseRecognizer, BaseTransmitter
from courier.sender.models import Document, RawFile


class ExampleRecognizer(BaseRecognizer):
    """Recognizes every non-empty file as a freshly created document.

    No parsing. Useful for local development and as a template.
    """

    DEFAULT_FORMAT: ClassVar[str] = "4.0"

    def __init__(self, document_format: str = DEFAULT_FORMAT) -> None:
        self._format = document_format

    def try_recognize(self, file: RawFile) -> Document | None:
        if not file.content:
            return None
        return Document(
            name=file.name,
            content=file.content,
            created=datetime.now(),
            format=self._format,
        )


class ExampleCryptographer(BaseCryptographer):
    """Returns the content unchanged. Does not sign anything."""

    def sign(self, content: bytes, certificate: object) -> bytes:
        _ = certificate
        return content


class ExampleTransmitter(BaseTransmitter):
    """Keeps payloads in memory instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[bytes] = []

    def try_send(self, content: bytes) -> bool:
        self.sent.append(content)
        Log.debug(f"Example transmitter accepted {len(content)} bytes")
        return True
