from typing import ClassVar

from courier.config.settings import Settings
from courier.logging.logger import Log
from courier.sender.base import BaseCryptographer, BaseRecognizer, BaseTransmitter
from courier.sender.example_adapters import (
    ExampleCryptographer,
    ExampleRecognizer,
    ExampleTransmitter,
)
from courier.sender.file_sender import FileSender, build_file_sender

AdapterSet = tuple[
    type[BaseRecognizer],
    type[BaseCryptographer],
    type[BaseTransmitter],
]


class SenderFactory:
    """Creates a FileSender wired with the configured adapters."""

    ADAPTERS: ClassVar[dict[str, AdapterSet]] = {
        "example": (ExampleRecognizer, ExampleCryptographer, ExampleTransmitter),
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        *,
        recognizer: BaseRecognizer | None = None,
        cryptographer: BaseCryptographer | None = None,
        transmitter: BaseTransmitter | None = None,
    ) -> FileSender:
        """Create a FileSender; explicitly passed adapters win over configured ones."""
        Log.configure(settings.log_level)
        name = settings.sender_adapters.lower()
        adapters = cls.ADAPTERS.get(name)
        if adapters is None:
            raise ValueError(
                f"Unknown sender adapters '{name}'. Choose from: {list(cls.ADAPTERS)}"
            )
        recognizer_cls, cryptographer_cls, transmitter_cls = adapters
        return build_file_sender(
            recognizer=recognizer if recognizer is not None else recognizer_cls(),
            cryptographer=(
                cryptographer if cryptographer is not None else cryptographer_cls()
            ),
            transmitter=transmitter if transmitter is not None else transmitter_cls(),
            accepted_formats=settings.accepted_formats,
            max_age_months=settings.max_document_age_months,
        )
