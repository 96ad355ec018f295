from receipt_parser.extraction.base import BaseTextExtractor
from receipt_parser.extraction.exceptions import ExtractionError
from receipt_parser.processor.models import ReceiptImage


class PlainTextAdapter(BaseTextExtractor):
    """Treats the upload as an already transcribed UTF-8 receipt.

    No network calls. Useful for local development and for receipts exported
    as text by a point-of-sale system.
    """

    async def extract(self, image: ReceiptImage) -> str:
        try:
            return image.content.decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"{image.file_name} is not UTF-8 text: {exc}") from exc
