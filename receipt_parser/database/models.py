from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class ExpenseRecord:
    """Represents a row from the expenses table."""

    id: int
    ledger_id: str
    merchant: str
    expense_date: str
    total: float
    items: list[dict[str, Any]]
    created_at: datetime | None = None
