from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True, eq=False)
class RawFile:
    """A named blob handed to the sender. Compared by identity, not content."""

    name: str
    content: bytes


@dataclass(frozen=True)
class Document:
    """Structured document produced by a recognizer from a RawFile."""

    name: str
    content: bytes
    created: datetime
    format: str


class SkipReason(str, Enum):
    """Why a file was not delivered."""

    NOT_RECOGNIZED = "not_recognized"
    BAD_FORMAT = "bad_format"
    OUTDATED = "outdated"
    SEND_FAILED = "send_failed"


@dataclass(frozen=True)
class SkippedFile:
    """Single undelivered file with the stage that rejected it."""

    file: RawFile
    reason: SkipReason


@dataclass
class SendResult:
    """Output of FileSender.send_files."""

    skipped: list[SkippedFile] = field(default_factory=list)

    @property
    def skipped_files(self) -> list[RawFile]:
        return [entry.file for entry in self.skipped]
