from abc import ABC, abstractmethod

from receipt_parser.structuring.models import ExpenseData


class BaseStructurer(ABC):
    """Contract for all structuring adapters."""

    @abstractmethod
    async def structure(self, text: str) -> ExpenseData:
        """Transform raw receipt text into structured expense data.

        Args:
            text: Plain text from the extraction step.

        Returns:
            ExpenseData with merchant, date, total and items.

        Raises:
            StructuringError: on any failure.
        """
