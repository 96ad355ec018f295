import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from receipt_parser.processor.models import DestinationHandle, ReceiptImage
from receipt_parser.structuring.models import ExpenseData, ExpenseItem


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page receipt PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Corner Shop Receipt")
    c.drawString(72, 700, "TOTAL 12.50")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def expense_data() -> ExpenseData:
    return ExpenseData(
        merchant="Corner Shop",
        date="2024-03-15",
        total=12.5,
        items=(
            ExpenseItem(item="Milk", quantity=2, price=1.5),
            ExpenseItem(item="Coffee", quantity=1, price=9.5),
        ),
    )


@pytest.fixture()
def destination() -> DestinationHandle:
    return DestinationHandle(target_id="sheet-123", credentials="token-abc")


@pytest.fixture()
def jpeg_image() -> ReceiptImage:
    return ReceiptImage(file_name="A.jpg", content=b"\xff\xd8fake-jpeg", mime_type="image/jpeg")
