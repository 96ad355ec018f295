from receipt_parser.processor.exceptions import ReceiptJobError


class StructuringError(ReceiptJobError):
    """Raised when receipt text cannot be turned into expense data."""


class StructuringValidationError(StructuringError):
    """Raised when the structured result does not match the expense shape."""


class StructuringNetworkError(StructuringError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
