from receipt_parser.processor.exceptions import ReceiptJobError


class ExtractionError(ReceiptJobError):
    """Raised when text cannot be extracted from a receipt file."""
