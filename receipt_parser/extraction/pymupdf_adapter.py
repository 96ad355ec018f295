import asyncio

import pymupdf

from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.exceptions import ExtractionError
from receipt_parser.processor.models import ReceiptImage


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts the text layer of PDF receipts using PyMuPDF."""

    async def extract(self, image: ReceiptImage) -> str:
        return await asyncio.to_thread(self._extract, image.content)

    @staticmethod
    def _extract(pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
