"""
Fruit Shop - a Command pattern demonstration on a toy inventory.

Usage:
    from fruit_shop import InventoryStore, CommandQueue
    from fruit_shop import IncreaseStockCommand, DecreaseStockCommand

    store = InventoryStore()
    queue = CommandQueue()
    queue.enqueue(IncreaseStockCommand(store, "Apples", 10))
    queue.enqueue(DecreaseStockCommand(store, "Apples", 3))
    queue.execute_all()
    store.display()
"""
from .bootstrap import FruitShop, ShopBuilder
from .commands import (
    CommandQueue,
    DecreaseStockCommand,
    ICommand,
    IncreaseStockCommand,
    QueueState,
    StockCommand,
)
from .config import ConfigManager, ShopConfig
from .exceptions import FruitShopError, InvalidItemError, InvalidQuantityError
from .output import CollectingSink, ConsoleSink, OutputSink
from .stock import InventoryStore

__all__ = [
    "InventoryStore",
    "ICommand",
    "StockCommand",
    "IncreaseStockCommand",
    "DecreaseStockCommand",
    "CommandQueue",
    "QueueState",
    "OutputSink",
    "ConsoleSink",
    "CollectingSink",
    "ConfigManager",
    "ShopConfig",
    "FruitShop",
    "ShopBuilder",
    "FruitShopError",
    "InvalidItemError",
    "InvalidQuantityError",
]
