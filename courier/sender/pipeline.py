from abc import ABC, abstractmethod
from dataclasses import dataclass

from courier.sender.models import Document, RawFile, SkipReason


@dataclass(slots=True)
class SendContext:
    file: RawFile
    certificate: object
    document: Document | None = None
    signed_content: bytes = b""
    skip_reason: SkipReason | None = None


class SendStep(ABC):
    @abstractmethod
    def run(self, context: SendContext) -> SendContext:
        raise NotImplementedError
