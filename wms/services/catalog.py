"""
Pure helpers over a catalog (a list of product dicts).

Nothing in here touches storage; the store and services call these and
persist the result themselves.
"""
from typing import Any, Iterable, Optional

LOW_STOCK_THRESHOLD = 10

STATUS_OUT_OF_STOCK = "Out of Stock"
STATUS_LOW_STOCK = "Low Stock"
STATUS_IN_STOCK = "In Stock"


class InvalidQuantityError(ValueError):
    """Exception raised when a stock quantity is not a non-negative integer."""
    pass


def parse_quantity(value: Any) -> int:
    """
    Parse a stock quantity, failing loudly instead of producing garbage.

    Accepts ints and integer strings (surrounding whitespace allowed).
    Booleans, floats with a fraction, negatives and anything else raise.
    """
    if isinstance(value, bool):
        raise InvalidQuantityError(f"Invalid quantity: {value!r}")
    if isinstance(value, int):
        qty = value
    elif isinstance(value, float) and value.is_integer():
        qty = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        qty = int(value.strip())
    else:
        raise InvalidQuantityError(f"Invalid quantity: {value!r}")

    if qty < 0:
        raise InvalidQuantityError(f"Quantity cannot be negative: {qty}")
    return qty


def stock_status(qty: int) -> str:
    if qty == 0:
        return STATUS_OUT_OF_STOCK
    if qty < LOW_STOCK_THRESHOLD:
        return STATUS_LOW_STOCK
    return STATUS_IN_STOCK


def is_low_stock(qty: int) -> bool:
    return 0 < qty < LOW_STOCK_THRESHOLD


def next_product_id(catalog: Iterable[dict]) -> int:
    """Return max(existing ids) + 1, or 1 for an empty catalog."""
    return max((item["id"] for item in catalog), default=0) + 1


def find_product(catalog: Iterable[dict], product_id: int) -> Optional[dict]:
    for item in catalog:
        if item.get("id") == product_id:
            return item
    return None


def filter_products(catalog: Iterable[dict], text: Optional[str] = None, category: Optional[str] = None) -> list[dict]:
    """
    Filter a catalog by free text and category.

    Args:
        catalog: Products to filter
        text: Case-insensitive substring matched against name OR sku
        category: Exact category; empty/None means any category

    Returns:
        Matching products in catalog order (possibly empty)
    """
    results = list(catalog)

    if text:
        needle = text.lower()
        results = [
            item for item in results
            if needle in str(item.get("name", "")).lower()
            or needle in str(item.get("sku", "")).lower()
        ]

    if category:
        results = [item for item in results if item.get("category") == category]

    return results


def list_categories(catalog: Iterable[dict]) -> list[str]:
    """Distinct non-empty categories in first-seen order."""
    seen: dict[str, None] = {}
    for item in catalog:
        category = item.get("category")
        if category:
            seen.setdefault(category, None)
    return list(seen)
