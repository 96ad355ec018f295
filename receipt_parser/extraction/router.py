from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.processor.models import ReceiptImage

PDF_MIME_TYPE = "application/pdf"


class MimeRoutingExtractor(BaseTextExtractor):
    """Sends PDF receipts to the PDF text-layer extractor and everything else to OCR."""

    def __init__(
        self,
        image_extractor: BaseTextExtractor,
        pdf_extractor: BaseTextExtractor,
    ) -> None:
        self._image_extractor = image_extractor
        self._pdf_extractor = pdf_extractor

    async def extract(self, image: ReceiptImage) -> str:
        if self._is_pdf(image):
            return await self._pdf_extractor.extract(image)
        return await self._image_extractor.extract(image)

    @staticmethod
    def _is_pdf(image: ReceiptImage) -> bool:
        return (
            image.mime_type.lower() == PDF_MIME_TYPE
            or image.file_name.lower().endswith(".pdf")
        )
