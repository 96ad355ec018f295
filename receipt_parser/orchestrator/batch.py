"""Drives a batch of uploaded receipts through the processing pipeline."""

import uuid
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from receipt_parser.config.settings import Settings
from receipt_parser.database.connection import close_pool, init_pool
from receipt_parser.logging.logger import Log
from receipt_parser.processor.exceptions import BatchValidationError
from receipt_parser.processor.models import DestinationHandle, ProcessedReceipt, ReceiptImage
from receipt_parser.processor.pipeline import ReceiptContext
from receipt_parser.processor.processor import ReceiptProcessor, build_processor
from receipt_parser.processor.status import SaveStatus
from receipt_parser.state.store import JobStateStore, Snapshot


def new_job_id() -> str:
    return uuid.uuid4().hex


class BatchOrchestrator:
    """Processes receipts one at a time and publishes progress through the store.

    Starting a new batch replaces the store contents, so a batch that is still
    running loses its records and stops at its next stage boundary.
    """

    def __init__(self, store: JobStateStore, processor: ReceiptProcessor) -> None:
        self._store = store
        self._processor = processor

    @property
    def store(self) -> JobStateStore:
        return self._store

    async def process_batch(
        self,
        images: Sequence[ReceiptImage],
        destination: DestinationHandle | None,
    ) -> Snapshot:
        """Run every image through the pipeline in input order.

        Returns:
            The final records of this batch, or an empty tuple when a newer
            batch replaced it before it finished.

        Raises:
            BatchValidationError: if there are no images or no destination.
        """
        destination = self._validate(images, destination)

        batch_id = uuid.uuid4().hex
        records = [ProcessedReceipt(id=new_job_id(), image=image) for image in images]
        self._store.reset(batch_id, records)
        Log.info(f"Started batch {batch_id} with {len(records)} receipts")

        for record in records:
            if not self._store.is_current(batch_id):
                Log.info(f"Batch {batch_id} was superseded, stopping")
                return ()
            context = ReceiptContext(
                job_id=record.id,
                image=record.image,
                destination=destination,
            )
            await self._processor.process(context)

        if not self._store.is_current(batch_id):
            return ()
        snapshot = self._store.snapshot()
        saved = sum(1 for r in snapshot if r.save_status is SaveStatus.SUCCESS)
        Log.info(f"Finished batch {batch_id}: {saved}/{len(snapshot)} receipts saved")
        return snapshot

    async def aclose(self) -> None:
        await self._processor.aclose()

    @staticmethod
    def _validate(
        images: Sequence[ReceiptImage],
        destination: DestinationHandle | None,
    ) -> DestinationHandle:
        if not images:
            raise BatchValidationError("Please upload at least one receipt image.")
        for image in images:
            if not isinstance(image, ReceiptImage):
                raise BatchValidationError(f"Unsupported upload: {image!r}")
        if destination is None or not destination.target_id.strip():
            raise BatchValidationError("Please connect a destination before processing.")
        return destination


def build_orchestrator(
    settings: Settings,
    store: JobStateStore | None = None,
) -> BatchOrchestrator:
    """Build an orchestrator with the configured extraction, structuring and persistence."""
    store = store if store is not None else JobStateStore()
    return BatchOrchestrator(store, build_processor(settings, store))


@asynccontextmanager
async def open_orchestrator(
    settings: Settings,
    store: JobStateStore | None = None,
) -> AsyncGenerator[BatchOrchestrator, None]:
    """Configure logging, open the database pool if needed, and close everything on exit."""
    Log.configure(settings.log_level)
    uses_database = settings.persistence_target.lower() == "postgres"
    if uses_database:
        await init_pool(settings)
    try:
        orchestrator = build_orchestrator(settings, store)
        try:
            yield orchestrator
        finally:
            await orchestrator.aclose()
    finally:
        if uses_database:
            await close_pool()
