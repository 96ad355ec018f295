from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.exceptions import ExtractionError
from receipt_parser.logging.logger import Log
from receipt_parser.persistence.base import BaseExpensePersister
from receipt_parser.processor.pipeline import PipelineStep, ReceiptContext
from receipt_parser.processor.status import (
    EXTRACTION_EMPTY_MESSAGE,
    ReceiptPhase,
    SaveStatus,
    status_label,
)
from receipt_parser.state.store import JobStateStore
from receipt_parser.structuring.base import BaseStructurer


class ExtractTextStep(PipelineStep):
    def __init__(self, store: JobStateStore, extractor: BaseTextExtractor) -> None:
        self._store = store
        self._extractor = extractor

    async def run(self, context: ReceiptContext) -> ReceiptContext:
        self._store.update(
            context.job_id,
            phase=ReceiptPhase.EXTRACTING,
            status=status_label(ReceiptPhase.EXTRACTING),
        )
        text = await self._extractor.extract(context.image)
        if not text or not text.strip():
            raise ExtractionError(EXTRACTION_EMPTY_MESSAGE)
        context.extracted_text = text
        Log.info(f"Extracted {len(text)} chars from {context.image.file_name}")
        return context


class StructureDataStep(PipelineStep):
    def __init__(self, store: JobStateStore, structurer: BaseStructurer) -> None:
        self._store = store
        self._structurer = structurer

    async def run(self, context: ReceiptContext) -> ReceiptContext:
        self._store.update(
            context.job_id,
            phase=ReceiptPhase.STRUCTURING,
            status=status_label(ReceiptPhase.STRUCTURING),
        )
        data = await self._structurer.structure(context.extracted_text)
        context.expense_data = data
        self._store.update(
            context.job_id,
            phase=ReceiptPhase.EXTRACTED,
            status=status_label(ReceiptPhase.EXTRACTED),
            data=data,
        )
        return context


class PersistExpenseStep(PipelineStep):
    def __init__(self, store: JobStateStore, persister: BaseExpensePersister) -> None:
        self._store = store
        self._persister = persister

    async def run(self, context: ReceiptContext) -> ReceiptContext:
        if context.expense_data is None:
            raise ValueError("ReceiptContext.expense_data must be set before persist")
        self._store.update(
            context.job_id,
            phase=ReceiptPhase.SAVING,
            status=status_label(ReceiptPhase.SAVING, self._persister.label),
        )
        await self._persister.persist(context.expense_data, context.destination)
        self._store.update(
            context.job_id,
            phase=ReceiptPhase.SUCCEEDED,
            status=status_label(ReceiptPhase.SUCCEEDED),
            save_status=SaveStatus.SUCCESS,
        )
        Log.info(f"Receipt {context.job_id} saved to {self._persister.label}")
        return context

    async def aclose(self) -> None:
        await self._persister.aclose()


class MarkFailedStep(PipelineStep):
    def __init__(self, store: JobStateStore) -> None:
        self._store = store

    async def run(self, context: ReceiptContext) -> ReceiptContext:
        self._store.update(
            context.job_id,
            phase=ReceiptPhase.FAILED,
            status=status_label(ReceiptPhase.FAILED),
            save_status=SaveStatus.FAILED,
            error=context.error_message,
        )
        Log.error(f"Receipt {context.job_id} marked as failed: {context.error_message}")
        return context
