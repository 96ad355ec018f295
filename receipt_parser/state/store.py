"""Observable in-memory store of receipt job state for the active batch."""

from collections.abc import Callable, Sequence
from dataclasses import fields, replace

from receipt_parser.logging.logger import Log
from receipt_parser.processor.exceptions import InvalidTransitionError
from receipt_parser.processor.models import ProcessedReceipt

Snapshot = tuple[ProcessedReceipt, ...]
Listener = Callable[[Snapshot], None]

_MUTABLE_FIELDS = frozenset(f.name for f in fields(ProcessedReceipt)) - {"id", "image"}


class JobStateStore:
    """Ordered, keyed collection of ProcessedReceipt records.

    Only the orchestrator and the pipeline steps it drives mutate the store.
    Every mutation pushes an immutable snapshot to all subscribed listeners.
    """

    def __init__(self) -> None:
        self._records: dict[str, ProcessedReceipt] = {}
        self._batch_id: str | None = None
        self._listeners: list[Listener] = []

    @property
    def batch_id(self) -> str | None:
        return self._batch_id

    def is_current(self, batch_id: str) -> bool:
        return self._batch_id == batch_id

    def reset(self, batch_id: str, records: Sequence[ProcessedReceipt]) -> None:
        """Replace the whole collection with the records of a new batch."""
        ids = [record.id for record in records]
        if len(set(ids)) != len(ids):
            raise ValueError("Receipt ids must be unique within a batch")
        self._batch_id = batch_id
        self._records = {record.id: record for record in records}
        self._emit()

    def get(self, job_id: str) -> ProcessedReceipt | None:
        return self._records.get(job_id)

    def contains(self, job_id: str) -> bool:
        return job_id in self._records

    def update(self, job_id: str, **changes: object) -> ProcessedReceipt | None:
        """Merge a partial field set into the record with the given id.

        Unknown ids are ignored (the job belongs to a superseded batch) and None
        is returned.

        Raises:
            ValueError: if a change names a field that cannot be updated.
            InvalidTransitionError: if the change would move the job backwards.
        """
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update receipt fields: {sorted(unknown)}")

        current = self._records.get(job_id)
        if current is None:
            Log.debug(f"Dropping update for unknown receipt {job_id}")
            return None

        updated = replace(current, **changes)  # type: ignore[arg-type]
        self._check_transition(current, updated)
        self._records[job_id] = updated
        self._emit()
        return updated

    def snapshot(self) -> Snapshot:
        return tuple(self._records.values())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                Log.exception(f"Receipt state listener {listener!r} failed")

    @staticmethod
    def _check_transition(current: ProcessedReceipt, updated: ProcessedReceipt) -> None:
        if updated.phase < current.phase:
            raise InvalidTransitionError(
                f"Receipt {current.id} cannot move from {current.phase.name} "
                f"back to {updated.phase.name}"
            )
        if current.phase.is_terminal and updated != current:
            raise InvalidTransitionError(
                f"Receipt {current.id} is already {current.phase.name}"
            )
