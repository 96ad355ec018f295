class ReceiptParserError(Exception):
    """Base exception for all receipt processing errors."""


class BatchValidationError(ReceiptParserError):
    """Raised when a batch cannot start. No job is created."""


class ReceiptJobError(ReceiptParserError):
    """Base exception for failures scoped to a single receipt job."""


class InvalidTransitionError(ReceiptParserError):
    """Raised when an update would move a job backwards or out of a terminal phase."""
