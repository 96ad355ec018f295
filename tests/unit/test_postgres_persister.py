import asyncio
from unittest.mock import AsyncMock

import psycopg
import pytest

from receipt_parser.database.repositories.expense_repository import ExpenseRepository
from receipt_parser.persistence.exceptions import PersistenceError
from receipt_parser.persistence.postgres_adapter import PostgresPersister
from receipt_parser.processor.models import DestinationHandle
from receipt_parser.structuring.models import ExpenseData


class TestPostgresPersister:
    def test_inserts_into_destination_ledger(self, expense_data: ExpenseData) -> None:
        repo = AsyncMock(spec=ExpenseRepository)
        repo.insert.return_value = 7

        asyncio.run(PostgresPersister(repo).persist(expense_data, DestinationHandle("ledger-9")))

        repo.insert.assert_awaited_once_with("ledger-9", expense_data)

    def test_database_error_raises_persistence_error(self, expense_data: ExpenseData) -> None:
        repo = AsyncMock(spec=ExpenseRepository)
        repo.insert.side_effect = psycopg.OperationalError("connection lost")

        with pytest.raises(PersistenceError, match="Failed to save to PostgreSQL"):
            asyncio.run(PostgresPersister(repo).persist(expense_data, DestinationHandle("l")))
