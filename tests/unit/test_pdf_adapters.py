import asyncio

import pytest

from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.exceptions import ExtractionError
from receipt_parser.extraction.pdfplumber_adapter import PdfPlumberAdapter
from receipt_parser.extraction.pymupdf_adapter import PyMuPdfAdapter
from receipt_parser.processor.models import ReceiptImage


def _pdf(content: bytes) -> ReceiptImage:
    return ReceiptImage(file_name="receipt.pdf", content=content, mime_type="application/pdf")


@pytest.fixture(params=[PdfPlumberAdapter, PyMuPdfAdapter], ids=["pdfplumber", "pymupdf"])
def adapter(request: pytest.FixtureRequest) -> BaseTextExtractor:
    return request.param()


class TestPdfAdapters:
    def test_extract_returns_text(self, adapter: BaseTextExtractor, sample_pdf_bytes: bytes) -> None:
        result = asyncio.run(adapter.extract(_pdf(sample_pdf_bytes)))
        assert "Corner Shop Receipt" in result
        assert "TOTAL 12.50" in result

    def test_extract_multi_page(
        self, adapter: BaseTextExtractor, multi_page_pdf_bytes: bytes
    ) -> None:
        result = asyncio.run(adapter.extract(_pdf(multi_page_pdf_bytes)))
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_empty_pdf_returns_empty_string(
        self, adapter: BaseTextExtractor, empty_pdf_bytes: bytes
    ) -> None:
        assert asyncio.run(adapter.extract(_pdf(empty_pdf_bytes))) == ""

    def test_extract_raises_on_invalid_bytes(self, adapter: BaseTextExtractor) -> None:
        with pytest.raises(ExtractionError):
            asyncio.run(adapter.extract(_pdf(b"not a pdf")))

    def test_extract_result_is_stripped(
        self, adapter: BaseTextExtractor, sample_pdf_bytes: bytes
    ) -> None:
        result = asyncio.run(adapter.extract(_pdf(sample_pdf_bytes)))
        assert result == result.strip()
