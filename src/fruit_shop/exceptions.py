"""
Fruit Shop Exceptions.

Catch FruitShopError to handle any failure raised by the package, or one of
the subclasses for finer control. The argument errors also derive from
ValueError so generic callers can treat them as bad input.
"""
from typing import Optional


class FruitShopError(Exception):
    """Base exception for all fruit_shop errors."""

    code: str = "fruit_shop_error"

    def __init__(self, message: Optional[str] = None):
        if message is None:
            message = "An unspecified fruit_shop error occurred."
        super().__init__(message)


class InvalidQuantityError(FruitShopError, ValueError):
    """Raised when a stock quantity is not a positive integer."""

    code: str = "invalid_quantity"


class InvalidItemError(FruitShopError, ValueError):
    """Raised when an item name is empty or not a string."""

    code: str = "invalid_item"


def validate_item(item) -> str:
    """
    Check an item name.

    Args:
        item: Candidate item name

    Returns:
        The item name unchanged

    Raises:
        InvalidItemError: If item is not a non-empty string
    """
    if not isinstance(item, str) or not item:
        raise InvalidItemError(f"Item name must be a non-empty string, got {item!r}")
    return item


def validate_quantity(quantity) -> int:
    """
    Check a stock quantity.

    bool is rejected even though it is an int subclass.

    Raises:
        InvalidQuantityError: If quantity is not an int greater than zero
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(f"Quantity must be an integer, got {quantity!r}")
    if quantity <= 0:
        raise InvalidQuantityError(f"Quantity must be positive, got {quantity}")
    return quantity
