from collections.abc import Sequence

from receipt_parser.config.settings import Settings
from receipt_parser.extraction.factory import ExtractorFactory
from receipt_parser.logging.logger import Log
from receipt_parser.persistence.factory import PersisterFactory
from receipt_parser.processor.exceptions import ReceiptJobError
from receipt_parser.processor.pipeline import PipelineStep, ReceiptContext
from receipt_parser.processor.status import UNKNOWN_ERROR_MESSAGE
from receipt_parser.processor.steps import (
    ExtractTextStep,
    MarkFailedStep,
    PersistExpenseStep,
    StructureDataStep,
)
from receipt_parser.state.store import JobStateStore
from receipt_parser.structuring.factory import StructurerFactory


class ReceiptProcessor:
    """Runs one receipt through the pipeline steps until it succeeds or fails.

    Pipeline: extract -> structure -> persist. A failure in any step is recorded
    on the job by the failed step and never propagates, so the batch can move on.
    """

    def __init__(
        self,
        store: JobStateStore,
        steps: Sequence[PipelineStep],
        failed_step: PipelineStep,
    ) -> None:
        self._store = store
        self._steps = list(steps)
        self._failed_step = failed_step

    async def process(self, context: ReceiptContext) -> None:
        Log.info(f"Processing receipt {context.image.file_name} as job {context.job_id}")
        try:
            for step in self._steps:
                if not self._store.contains(context.job_id):
                    Log.info(f"Job {context.job_id} belongs to a superseded batch, stopping")
                    return
                context = await step.run(context)
        except ReceiptJobError as exc:
            await self._fail(context, str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected error while processing job {context.job_id}")
            await self._fail(context, str(exc))

    async def aclose(self) -> None:
        for step in [*self._steps, self._failed_step]:
            await step.aclose()

    async def _fail(self, context: ReceiptContext, message: str) -> None:
        record = self._store.get(context.job_id)
        if record is None or record.phase.is_terminal:
            Log.warning(f"Job {context.job_id} already finished, not marking it failed: {message}")
            return
        context.error_message = message or UNKNOWN_ERROR_MESSAGE
        await self._failed_step.run(context)


def build_processor(settings: Settings, store: JobStateStore) -> ReceiptProcessor:
    """Build a ReceiptProcessor with the configured adapters."""
    extractor = ExtractorFactory.create(settings)
    structurer = StructurerFactory.create(settings)
    persister = PersisterFactory.create(settings)
    steps: list[PipelineStep] = [
        ExtractTextStep(store, extractor),
        StructureDataStep(store, structurer),
        PersistExpenseStep(store, persister),
    ]
    return ReceiptProcessor(store, steps=steps, failed_step=MarkFailedStep(store))
