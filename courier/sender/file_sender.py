from collections.abc import Collection, Sequence
from datetime import datetime

from courier.logging.logger import Log
from courier.sender.base import BaseCryptographer, BaseRecognizer, BaseTransmitter
from courier.sender.models import RawFile, SendResult, SkippedFile, SkipReason
from courier.sender.pipeline import SendContext, SendStep
from courier.sender.steps import (
    CheckActualStep,
    CheckFormatStep,
    Clock,
    RecognizeStep,
    SignStep,
    TransmitStep,
)

DEFAULT_ACCEPTED_FORMATS: tuple[str, ...] = ("4.0", "3.1")


class FileSender:
    """Runs every file of a batch through the send steps independently.

    Pipeline: recognize -> check format -> check freshness -> sign -> transmit.
    A file that any step marks as skipped ends up in the result; the rest of
    its steps are not run. Exceptions raised by a step abort the whole batch.
    """

    def __init__(self, steps: Sequence[SendStep]) -> None:
        self._steps = list(steps)

    def send_files(self, files: Sequence[RawFile], certificate: object) -> SendResult:
        """Try to deliver every file and report the ones that were not delivered."""
        Log.info(f"Sending batch of {len(files)} files")
        skipped = [
            SkippedFile(file=file, reason=reason)
            for file in files
            if (reason := self._try_send_file(file, certificate)) is not None
        ]
        Log.info(
            f"Batch done: {len(files) - len(skipped)} delivered, {len(skipped)} skipped"
        )
        return SendResult(skipped=skipped)

    def _try_send_file(self, file: RawFile, certificate: object) -> SkipReason | None:
        context = SendContext(file=file, certificate=certificate)
        for step in self._steps:
            context = step.run(context)
            if context.skip_reason is not None:
                Log.info(f"Skipped {file.name}: {context.skip_reason.value}")
                return context.skip_reason
        Log.debug(f"Delivered {file.name}")
        return None


def build_file_sender(
    recognizer: BaseRecognizer,
    cryptographer: BaseCryptographer,
    transmitter: BaseTransmitter,
    accepted_formats: Collection[str] = DEFAULT_ACCEPTED_FORMATS,
    max_age_months: int = 1,
    clock: Clock | None = None,
) -> FileSender:
    """Build a FileSender with the standard step order."""
    return FileSender(
        steps=[
            RecognizeStep(recognizer),
            CheckFormatStep(accepted_formats),
            CheckActualStep(max_age_months, clock=clock or datetime.now),
            SignStep(cryptographer),
            TransmitStep(transmitter),
        ]
    )
