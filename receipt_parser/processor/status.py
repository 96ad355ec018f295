from enum import IntEnum, StrEnum

EXTRACTION_EMPTY_MESSAGE = "Could not extract any text. The image might be unclear."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class SaveStatus(StrEnum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class ReceiptPhase(IntEnum):
    """Ordered phases of a receipt job. A job never moves to a lower value."""

    QUEUED = 0
    EXTRACTING = 1
    STRUCTURING = 2
    EXTRACTED = 3
    SAVING = 4
    SUCCEEDED = 5
    FAILED = 6

    @property
    def is_terminal(self) -> bool:
        return self in (ReceiptPhase.SUCCEEDED, ReceiptPhase.FAILED)


_LABELS: dict[ReceiptPhase, str] = {
    ReceiptPhase.QUEUED: "Queued",
    ReceiptPhase.EXTRACTING: "Processing OCR...",
    ReceiptPhase.STRUCTURING: "Structuring data...",
    ReceiptPhase.EXTRACTED: "Data extracted",
    ReceiptPhase.SAVING: "Saving to {target}...",
    ReceiptPhase.SUCCEEDED: "Saved successfully!",
    ReceiptPhase.FAILED: "Failed",
}


def status_label(phase: ReceiptPhase, target: str = "") -> str:
    """User-facing status text for a phase."""
    return _LABELS[phase].format(target=target)
