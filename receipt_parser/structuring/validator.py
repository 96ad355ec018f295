"""Validates raw parsed JSON against the expense data shape."""

import math
from typing import Any

from receipt_parser.structuring.exceptions import StructuringValidationError
from receipt_parser.structuring.models import ExpenseData, ExpenseItem

_MAX_ITEMS = 500


def validate_and_build(data: dict[str, Any]) -> ExpenseData:
    """Validate raw parsed JSON and build an ExpenseData.

    Raises:
        StructuringValidationError: on any validation failure.
    """
    _require_top_level_fields(data)
    merchant = _require_string(data["merchant"], "merchant")
    date = _require_string(data["date"], "date")
    total = _require_number(data["total"], "total")
    items = _build_items(data["items"])
    return ExpenseData(merchant=merchant, date=date, total=total, items=items)


def _require_top_level_fields(data: dict[str, Any]) -> None:
    for field in ("merchant", "date", "total", "items"):
        if field not in data:
            raise StructuringValidationError(f"Missing required field: {field}")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _require_string(raw: Any, name: str) -> str:
    if not isinstance(raw, str):
        raise StructuringValidationError(f"'{name}' must be a string")
    return raw.strip()


def _require_number(raw: Any, name: str) -> float:
    if not _is_number(raw):
        raise StructuringValidationError(f"'{name}' must be a finite number")
    return float(raw)


def _build_items(raw: Any) -> tuple[ExpenseItem, ...]:
    if not isinstance(raw, list):
        raise StructuringValidationError("'items' must be a list")
    if len(raw) > _MAX_ITEMS:
        raise StructuringValidationError(f"Too many items: {len(raw)} (max {_MAX_ITEMS})")
    return tuple(_build_item(item, i) for i, item in enumerate(raw))


def _build_item(raw: Any, index: int) -> ExpenseItem:
    if not isinstance(raw, dict):
        raise StructuringValidationError(f"Item at index {index} must be an object")
    for field in ("item", "quantity", "price"):
        if field not in raw:
            raise StructuringValidationError(f"Item at index {index}: missing '{field}'")
    name = raw["item"]
    if not isinstance(name, str):
        raise StructuringValidationError(f"Item at index {index}: 'item' must be a string")
    quantity = raw["quantity"]
    if not _is_number(quantity) or quantity < 0 or quantity != int(quantity):
        raise StructuringValidationError(
            f"Item at index {index}: 'quantity' must be a non-negative integer"
        )
    price = raw["price"]
    if not _is_number(price) or price < 0:
        raise StructuringValidationError(
            f"Item at index {index}: 'price' must be a non-negative number"
        )
    return ExpenseItem(item=name.strip(), quantity=int(quantity), price=float(price))
