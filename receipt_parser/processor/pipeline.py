from abc import ABC, abstractmethod
from dataclasses import dataclass

from receipt_parser.processor.models import DestinationHandle, ReceiptImage
from receipt_parser.structuring.models import ExpenseData


@dataclass(slots=True)
class ReceiptContext:
    job_id: str
    image: ReceiptImage
    destination: DestinationHandle
    extracted_text: str = ""
    expense_data: ExpenseData | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: ReceiptContext) -> ReceiptContext:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None
