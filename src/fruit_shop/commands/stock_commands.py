"""
Stock Commands - concrete commands acting on an InventoryStore.

Provides:
- IncreaseStockCommand: add units of an item
- DecreaseStockCommand: sell units of an item if enough are in stock
"""
from abc import ABC

from loguru import logger

from .base import ICommand
from ..exceptions import validate_item, validate_quantity
from ..stock import InventoryStore


class StockCommand(ICommand, ABC):
    """
    Shared state for commands bound to one store, item and quantity.

    Arguments are checked here so a bad command fails when it is built,
    not when the queue is drained. They cannot be changed afterwards.
    """

    def __init__(self, store: InventoryStore, item: str, quantity: int):
        """
        Args:
            store: Store to act on (not owned by the command)
            item: Item name
            quantity: Positive number of units

        Raises:
            InvalidItemError: If item is empty or not a string
            InvalidQuantityError: If quantity is not a positive integer
        """
        self._store = store
        self._item = validate_item(item)
        self._quantity = validate_quantity(quantity)

    @property
    def store(self) -> InventoryStore:
        return self._store

    @property
    def item(self) -> str:
        return self._item

    @property
    def quantity(self) -> int:
        return self._quantity

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._item!r}, {self._quantity})"


class IncreaseStockCommand(StockCommand):
    """
    Adds stock for an item.

    Example:
        queue.enqueue(IncreaseStockCommand(store, "Apples", 10))
    """

    @property
    def description(self) -> str:
        return f"Add {self._quantity} {self._item}"

    def execute(self) -> None:
        self._store.increase(self._item, self._quantity)


class DecreaseStockCommand(StockCommand):
    """
    Sells stock for an item.

    A shortage is reported by the store's output and logged here; it is
    not returned to the queue, which never learns whether the sale went
    through.
    """

    @property
    def description(self) -> str:
        return f"Sell {self._quantity} {self._item}"

    def execute(self) -> None:
        sold = self._store.decrease(self._item, self._quantity)
        if not sold:
            logger.debug(f"{self.description}: not enough stock, sale skipped")
