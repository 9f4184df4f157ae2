"""
Inventory Store - the receiver of stock commands.

Holds the item -> quantity map and performs the actual stock changes.
It knows nothing about commands or the queue that drives it.
"""
from typing import Dict, List, Optional, Tuple

from loguru import logger

from .exceptions import validate_item, validate_quantity
from .output import ConsoleSink, OutputSink


class InventoryStore:
    """
    Mutable fruit inventory.

    Items keep the order in which they were first added. An item sold
    down to zero stays listed with quantity 0.

    Usage:
        store = InventoryStore()
        store.increase("Apples", 10)
        store.decrease("Apples", 3)   # True
        store.decrease("Pears", 1)    # False, nothing changes
        store.snapshot()              # [("Apples", 7)]
    """

    HEADER = "Current Stock:"

    def __init__(self, sink: Optional[OutputSink] = None):
        """
        Initialize an empty store.

        Args:
            sink: Where operation messages are written (default: stdout)
        """
        self._quantities: Dict[str, int] = {}
        self._sink = sink if sink is not None else ConsoleSink()

    @property
    def sink(self) -> OutputSink:
        return self._sink

    @property
    def quantities(self) -> Dict[str, int]:
        """Copy of the current item -> quantity map."""
        return dict(self._quantities)

    def __contains__(self, item: str) -> bool:
        return item in self._quantities

    def __len__(self) -> int:
        return len(self._quantities)

    def quantity_of(self, item: str) -> int:
        """Current quantity of an item, 0 if it was never added."""
        return self._quantities.get(item, 0)

    def increase(self, item: str, amount: int) -> None:
        """
        Add stock for an item, inserting it if absent.

        Args:
            item: Item name
            amount: Positive number of units to add

        Raises:
            InvalidItemError: If item is empty or not a string
            InvalidQuantityError: If amount is not a positive integer
        """
        validate_item(item)
        validate_quantity(amount)

        self._quantities[item] = self._quantities.get(item, 0) + amount
        logger.debug(f"Stock of {item} increased by {amount} to {self._quantities[item]}")
        self._sink.write_line(f"Added {amount} {item}(s) to the stock.")

    def decrease(self, item: str, amount: int) -> bool:
        """
        Remove stock for an item if enough is available.

        Running short is an expected outcome, not an error: the store is
        left unchanged and False is returned.

        Args:
            item: Item name
            amount: Positive number of units to remove

        Returns:
            True if the stock was reduced, False on shortage

        Raises:
            InvalidItemError: If item is empty or not a string
            InvalidQuantityError: If amount is not a positive integer
        """
        validate_item(item)
        validate_quantity(amount)

        available = self._quantities.get(item)
        if available is None or available < amount:
            logger.info(f"Cannot sell {amount} {item}: {available or 0} in stock")
            self._sink.write_line(f"Sorry, we don't have enough {item} in stock.")
            return False

        self._quantities[item] = available - amount
        logger.debug(f"Stock of {item} decreased by {amount} to {self._quantities[item]}")
        self._sink.write_line(f"Sold {amount} {item}(s).")
        return True

    def snapshot(self) -> List[Tuple[str, int]]:
        """(item, quantity) pairs in first-insertion order."""
        return list(self._quantities.items())

    def display(self) -> None:
        """Write the stock header followed by one line per item."""
        self._sink.write_line(self.HEADER)
        for item, quantity in self.snapshot():
            self._sink.write_line(f"{item}: {quantity}")
