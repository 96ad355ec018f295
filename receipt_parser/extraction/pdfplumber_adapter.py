import asyncio
import io

import pdfplumber

from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.exceptions import ExtractionError
from receipt_parser.processor.models import ReceiptImage


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts the text layer of PDF receipts using pdfplumber."""

    async def extract(self, image: ReceiptImage) -> str:
        return await asyncio.to_thread(self._extract, image.content)

    @staticmethod
    def _extract(pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
