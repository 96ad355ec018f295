from receipt_parser.config.providers import resolve_base_url, supported_providers
from receipt_parser.config.settings import Settings
from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.openai_vision_adapter import OpenAIVisionAdapter
from receipt_parser.extraction.pdfplumber_adapter import PdfPlumberAdapter
from receipt_parser.extraction.pymupdf_adapter import PyMuPdfAdapter
from receipt_parser.extraction.router import MimeRoutingExtractor
from receipt_parser.extraction.text_adapter import PlainTextAdapter


class ExtractorFactory:
    """Creates the configured text extractor."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        """Create an extractor that routes PDFs and images to their adapters."""
        return MimeRoutingExtractor(
            image_extractor=cls.create_image_extractor(settings),
            pdf_extractor=cls.create_pdf_extractor(settings),
        )

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_image_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.extraction_engine.lower()
        if engine == "text":
            return PlainTextAdapter()
        if engine not in supported_providers():
            raise ValueError(
                f"Unknown extraction engine '{engine}'. "
                f"Choose from: {supported_providers('text')}"
            )
        return OpenAIVisionAdapter(
            api_key=settings.extraction_api_key,
            model=settings.extraction_model_name,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=resolve_base_url(
                engine, settings.extraction_base_url, "extraction_base_url"
            ),
        )
