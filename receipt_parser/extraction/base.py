from abc import ABC, abstractmethod

from receipt_parser.processor.models import ReceiptImage


class BaseTextExtractor(ABC):
    """Contract for all receipt text extraction adapters."""

    @abstractmethod
    async def extract(self, image: ReceiptImage) -> str:
        """Extract plain text from an uploaded receipt.

        Args:
            image: The uploaded receipt file.

        Returns:
            Extracted text. May be empty when nothing legible was found.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
