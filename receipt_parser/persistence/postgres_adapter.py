import psycopg

from receipt_parser.database.repositories.expense_repository import ExpenseRepository
from receipt_parser.logging.logger import Log
from receipt_parser.persistence.base import BaseExpensePersister
from receipt_parser.persistence.exceptions import PersistenceError
from receipt_parser.processor.models import DestinationHandle
from receipt_parser.structuring.models import ExpenseData


class PostgresPersister(BaseExpensePersister):
    """Inserts one expenses row per receipt, keyed by the destination ledger id."""

    label = "PostgreSQL"

    def __init__(self, repository: ExpenseRepository) -> None:
        self._repository = repository

    async def persist(self, data: ExpenseData, destination: DestinationHandle) -> None:
        try:
            expense_id = await self._repository.insert(destination.target_id, data)
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to save to PostgreSQL: {exc}") from exc
        Log.info(f"Stored expense {expense_id} in ledger {destination.target_id}")
