from dataclasses import asdict

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from receipt_parser.database.connection import get_connection
from receipt_parser.database.models import ExpenseRecord
from receipt_parser.structuring.models import ExpenseData


class ExpenseRepository:
    """Database operations for the expenses table."""

    async def insert(self, ledger_id: str, data: ExpenseData) -> int:
        """Insert one expense and return its id."""
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    """
                    INSERT INTO expenses (ledger_id, merchant, expense_date, total, items)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING id
                    """,
                    (
                        ledger_id,
                        data.merchant,
                        data.date,
                        data.total,
                        Jsonb([asdict(item) for item in data.items]),
                    ),
                )
                row = await cur.fetchone()
            await conn.commit()
        if row is None:
            raise RuntimeError("INSERT INTO expenses returned no id")
        return int(row[0])

    async def find_by_id(self, expense_id: int) -> ExpenseRecord | None:
        """Find an expense by ID. Useful for tests."""
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    """
                    SELECT id, ledger_id, merchant, expense_date, total, items, created_at
                    FROM expenses
                    WHERE id = %s
                    """,
                    (expense_id,),
                )
                row = await cur.fetchone()

        if row is None:
            return None

        return ExpenseRecord(
            id=row["id"],
            ledger_id=row["ledger_id"],
            merchant=row["merchant"],
            expense_date=row["expense_date"],
            total=float(row["total"]),
            items=row["items"],
            created_at=row["created_at"],
        )
