from dataclasses import dataclass


@dataclass(frozen=True)
class ExpenseItem:
    """A single line item on a receipt."""

    item: str
    quantity: int = 1
    price: float = 0.0


@dataclass(frozen=True)
class ExpenseData:
    """Output of the structuring step."""

    merchant: str
    date: str
    total: float
    items: tuple[ExpenseItem, ...] = ()
