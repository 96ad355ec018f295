from dataclasses import dataclass, field

from receipt_parser.processor.status import ReceiptPhase, SaveStatus, status_label
from receipt_parser.structuring.models import ExpenseData


@dataclass(frozen=True)
class ReceiptImage:
    """An uploaded receipt file as received from the client."""

    file_name: str
    content: bytes = field(repr=False)
    mime_type: str = "image/jpeg"


@dataclass(frozen=True)
class DestinationHandle:
    """Pre-resolved persistence destination: target id plus credentials.

    For Google Sheets the target is the spreadsheet id and the credential an OAuth
    access token; for Notion the database id and an integration token; for
    PostgreSQL the ledger id (credentials unused).
    """

    target_id: str
    credentials: str = field(default="", repr=False)


@dataclass(frozen=True)
class ProcessedReceipt:
    """State of a single uploaded receipt throughout the processing workflow."""

    id: str
    image: ReceiptImage
    phase: ReceiptPhase = ReceiptPhase.QUEUED
    status: str = status_label(ReceiptPhase.QUEUED)
    data: ExpenseData | None = None
    save_status: SaveStatus = SaveStatus.PENDING
    error: str | None = None

    def __post_init__(self) -> None:
        if self.save_status is SaveStatus.SUCCESS and (
            self.data is None or self.error is not None
        ):
            raise ValueError(
                f"Receipt {self.id}: save_status=success requires data and no error"
            )
        if self.save_status is SaveStatus.FAILED and self.error is None:
            raise ValueError(f"Receipt {self.id}: save_status=failed requires an error")
