from courier.sender.base import BaseCryptographer, BaseRecognizer, BaseTransmitter
from courier.sender.factory import SenderFactory
from courier.sender.file_sender import FileSender, build_file_sender
from courier.sender.models import Document, RawFile, SendResult, SkippedFile, SkipReason

__all__ = [
    "BaseCryptographer",
    "BaseRecognizer",
    "BaseTransmitter",
    "Document",
    "FileSender",
    "RawFile",
    "SendResult",
    "SenderFactory",
    "SkipReason",
    "SkippedFile",
    "build_file_sender",
]
