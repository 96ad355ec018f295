import pytest

from receipt_parser.processor.models import ProcessedReceipt, ReceiptImage
from receipt_parser.processor.status import ReceiptPhase, SaveStatus, status_label
from receipt_parser.structuring.models import ExpenseData

_IMAGE = ReceiptImage(file_name="r.jpg", content=b"x")


class TestProcessedReceiptInvariants:
    def test_new_record_is_queued_and_pending(self) -> None:
        record = ProcessedReceipt(id="a", image=_IMAGE)
        assert record.phase is ReceiptPhase.QUEUED
        assert record.status == "Queued"
        assert record.save_status is SaveStatus.PENDING
        assert record.data is None
        assert record.error is None

    def test_success_requires_data(self) -> None:
        with pytest.raises(ValueError, match="success"):
            ProcessedReceipt(id="a", image=_IMAGE, save_status=SaveStatus.SUCCESS)

    def test_success_forbids_error(self) -> None:
        data = ExpenseData(merchant="m", date="d", total=1.0)
        with pytest.raises(ValueError, match="success"):
            ProcessedReceipt(
                id="a", image=_IMAGE, data=data, save_status=SaveStatus.SUCCESS, error="boom"
            )

    def test_failed_requires_error(self) -> None:
        with pytest.raises(ValueError, match="failed"):
            ProcessedReceipt(id="a", image=_IMAGE, save_status=SaveStatus.FAILED)

    def test_image_bytes_are_hidden_from_repr(self) -> None:
        image = ReceiptImage(file_name="r.jpg", content=b"secret-bytes")
        assert "secret-bytes" not in repr(image)


class TestStatusLabels:
    def test_saving_label_names_target(self) -> None:
        assert status_label(ReceiptPhase.SAVING, "Google Sheets") == "Saving to Google Sheets..."

    def test_phase_order(self) -> None:
        assert ReceiptPhase.QUEUED < ReceiptPhase.EXTRACTING < ReceiptPhase.STRUCTURING
        assert ReceiptPhase.STRUCTURING < ReceiptPhase.EXTRACTED < ReceiptPhase.SAVING
        assert ReceiptPhase.SUCCEEDED.is_terminal
        assert ReceiptPhase.FAILED.is_terminal
        assert not ReceiptPhase.SAVING.is_terminal
