from datetime import date

from receipt_parser.structuring.models import ExpenseData, ExpenseItem

NOTION_RICH_TEXT_LIMIT = 2000


def sheet_items_text(items: tuple[ExpenseItem, ...]) -> str:
    """One-line summary: ``Milk (2x 1.50), Bread (1x 2.00)``."""
    return ", ".join(f"{i.item} ({i.quantity}x {i.price:.2f})" for i in items)


def notion_items_text(items: tuple[ExpenseItem, ...]) -> str:
    lines = "\n".join(
        f"- {i.item} (Qty: {i.quantity}, Price: {i.price:.2f})" for i in items
    )
    return lines[:NOTION_RICH_TEXT_LIMIT]


def sheet_row(data: ExpenseData, today: date | None = None) -> list[object]:
    """Row layout: Date, Merchant, Total, Items."""
    fallback_date = (today or date.today()).isoformat()
    return [
        data.date or fallback_date,
        data.merchant or "Unknown",
        data.total,
        sheet_items_text(data.items),
    ]


def notion_title(data: ExpenseData) -> str:
    return f"{data.merchant or 'Expense'} on {data.date or 'Unknown Date'}"
