import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from receipt_parser.config.settings import Settings
from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.exceptions import ExtractionError
from receipt_parser.extraction.factory import ExtractorFactory
from receipt_parser.extraction.pdfplumber_adapter import PdfPlumberAdapter
from receipt_parser.extraction.pymupdf_adapter import PyMuPdfAdapter
from receipt_parser.extraction.router import MimeRoutingExtractor
from receipt_parser.extraction.text_adapter import PlainTextAdapter
from receipt_parser.processor.models import ReceiptImage


class TestExtractorFactory:
    def test_creates_router(self) -> None:
        settings = Settings(extraction_engine="text")
        assert isinstance(ExtractorFactory.create(settings), MimeRoutingExtractor)

    def test_creates_pdfplumber_by_default(self) -> None:
        settings = Settings()
        assert isinstance(ExtractorFactory.create_pdf_extractor(settings), PdfPlumberAdapter)

    def test_creates_pymupdf(self) -> None:
        settings = Settings(pdf_engine="PyMuPDF")
        assert isinstance(ExtractorFactory.create_pdf_extractor(settings), PyMuPdfAdapter)

    def test_unknown_pdf_engine_raises(self) -> None:
        settings = Settings(pdf_engine="tesseract")
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            ExtractorFactory.create_pdf_extractor(settings)

    def test_creates_text_adapter(self) -> None:
        settings = Settings(extraction_engine="text")
        assert isinstance(ExtractorFactory.create_image_extractor(settings), PlainTextAdapter)

    def test_creates_vision_adapter_with_settings(self) -> None:
        settings = Settings(
            extraction_engine="openrouter",
            extraction_api_key="k",
            extraction_model_name="vision",
            extraction_timeout_seconds=12,
        )
        with patch("receipt_parser.extraction.factory.OpenAIVisionAdapter") as mock_adapter:
            ExtractorFactory.create_image_extractor(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            model="vision",
            timeout_seconds=12,
            base_url="https://openrouter.ai/api/v1",
        )

    def test_unknown_engine_raises(self) -> None:
        settings = Settings(extraction_engine="carrier-pigeon")
        with pytest.raises(ValueError, match="Unknown extraction engine"):
            ExtractorFactory.create_image_extractor(settings)


class TestMimeRoutingExtractor:
    def _router(self) -> tuple[MimeRoutingExtractor, AsyncMock, AsyncMock]:
        image_extractor = AsyncMock(spec=BaseTextExtractor)
        image_extractor.extract.return_value = "from image"
        pdf_extractor = AsyncMock(spec=BaseTextExtractor)
        pdf_extractor.extract.return_value = "from pdf"
        return MimeRoutingExtractor(image_extractor, pdf_extractor), image_extractor, pdf_extractor

    def test_routes_pdf_by_mime_type(self) -> None:
        router, image_extractor, _pdf = self._router()
        upload = ReceiptImage(file_name="scan", content=b"%PDF", mime_type="application/pdf")
        assert asyncio.run(router.extract(upload)) == "from pdf"
        image_extractor.extract.assert_not_called()

    def test_routes_pdf_by_extension(self) -> None:
        router, _image, _pdf = self._router()
        upload = ReceiptImage(
            file_name="Receipt.PDF", content=b"%PDF", mime_type="application/octet-stream"
        )
        assert asyncio.run(router.extract(upload)) == "from pdf"

    def test_routes_images_to_ocr(self, jpeg_image: ReceiptImage) -> None:
        router, _image, pdf_extractor = self._router()
        assert asyncio.run(router.extract(jpeg_image)) == "from image"
        pdf_extractor.extract.assert_not_called()


class TestPlainTextAdapter:
    def test_decodes_utf8(self) -> None:
        upload = ReceiptImage(file_name="r.txt", content="  Café 3.20\n".encode(), mime_type="text/plain")
        assert asyncio.run(PlainTextAdapter().extract(upload)) == "Café 3.20"

    def test_rejects_binary(self, jpeg_image: ReceiptImage) -> None:
        with pytest.raises(ExtractionError, match="not UTF-8"):
            asyncio.run(PlainTextAdapter().extract(jpeg_image))
