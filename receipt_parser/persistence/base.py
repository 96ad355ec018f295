from abc import ABC, abstractmethod

from receipt_parser.processor.models import DestinationHandle
from receipt_parser.structuring.models import ExpenseData


class BaseExpensePersister(ABC):
    """Contract for all persistence strategies."""

    #: Human-readable destination name shown in the job status.
    label: str = ""

    @abstractmethod
    async def persist(self, data: ExpenseData, destination: DestinationHandle) -> None:
        """Write one expense record to the destination.

        Raises:
            PersistenceError: with the upstream status and message on failure.
        """

    async def aclose(self) -> None:
        """Release network or database resources held by the strategy."""
