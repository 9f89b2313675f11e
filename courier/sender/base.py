from abc import ABC, abstractmethod

from courier.sender.models import Document, RawFile


class BaseRecognizer(ABC):
    """Contract for all recognizer adapters."""

    @abstractmethod
    def try_recognize(self, file: RawFile) -> Document | None:
        """Turn a raw file into a structured document.

        Args:
            file: Raw file as handed to the sender.

        Returns:
            The recognized Document, or None if the file is not recognized.
        """


class BaseCryptographer(ABC):
    """Contract for all signing adapters."""

    @abstractmethod
    def sign(self, content: bytes, certificate: object) -> bytes:
        """Sign document content with an opaque certificate.

        Returns:
            Signed payload ready for transmission.

        Raises:
            Any adapter-specific error; the sender does not catch it.
        """


class BaseTransmitter(ABC):
    """Contract for all transport adapters."""

    @abstractmethod
    def try_send(self, content: bytes) -> bool:
        """Deliver a signed payload. Returns False when delivery failed."""
