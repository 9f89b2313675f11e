from collections.abc import Callable, Collection
from datetime import datetime, tzinfo

from dateutil.relativedelta import relativedelta

from courier.logging.logger import Log
from courier.sender.base import BaseCryptographer, BaseRecognizer, BaseTransmitter
from courier.sender.models import Document, SkipReason
from courier.sender.pipeline import SendContext, SendStep

Clock = Callable[[tzinfo | None], datetime]


def _require_document(context: SendContext, stage: str) -> Document:
    if context.document is None:
        raise ValueError(f"SendContext.document must be set before {stage}")
    return context.document


class RecognizeStep(SendStep):
    def __init__(self, recognizer: BaseRecognizer) -> None:
        self._recognizer = recognizer

    def run(self, context: SendContext) -> SendContext:
        document = self._recognizer.try_recognize(context.file)
        if document is None:
            context.skip_reason = SkipReason.NOT_RECOGNIZED
            return context
        context.document = document
        Log.debug(f"Recognized {context.file.name} as format {document.format!r}")
        return context


class CheckFormatStep(SendStep):
    """Accepts only exact, case-sensitive format identifiers."""

    def __init__(self, accepted_formats: Collection[str]) -> None:
        self._accepted_formats = frozenset(accepted_formats)

    def run(self, context: SendContext) -> SendContext:
        document = _require_document(context, "format check")
        if document.format not in self._accepted_formats:
            context.skip_reason = SkipReason.BAD_FORMAT
        return context


class CheckActualStep(SendStep):
    """Rejects documents whose creation date plus the allowed age is not in the future.

    The age is added in calendar months, so Jan 31 + 1 month lands on the
    last day of February.
    """

    def __init__(self, max_age_months: int = 1, clock: Clock = datetime.now) -> None:
        self._max_age = relativedelta(months=max_age_months)
        self._clock = clock

    def run(self, context: SendContext) -> SendContext:
        document = _require_document(context, "freshness check")
        now = self._clock(document.created.tzinfo)
        if not document.created + self._max_age > now:
            context.skip_reason = SkipReason.OUTDATED
        return context


class SignStep(SendStep):
    def __init__(self, cryptographer: BaseCryptographer) -> None:
        self._cryptographer = cryptographer

    def run(self, context: SendContext) -> SendContext:
        document = _require_document(context, "signing")
        context.signed_content = self._cryptographer.sign(
            document.content, context.certificate
        )
        return context


class TransmitStep(SendStep):
    def __init__(self, transmitter: BaseTransmitter) -> None:
        self._transmitter = transmitter

    def run(self, context: SendContext) -> SendContext:
        if not self._transmitter.try_send(context.signed_content):
            context.skip_reason = SkipReason.SEND_FAILED
        return context
