from receipt_parser.processor.exceptions import ReceiptJobError


class PersistenceError(ReceiptJobError):
    """Raised when expense data cannot be written to the destination."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
