"""
Command System.

Provides Command pattern infrastructure for the shop:
- ICommand: Interface for queued commands
- IncreaseStockCommand / DecreaseStockCommand: Stock operations
- CommandQueue: FIFO invoker that drains and executes commands
"""
from .base import ICommand
from .stock_commands import StockCommand, IncreaseStockCommand, DecreaseStockCommand
from .invoker import CommandQueue, QueueState

__all__ = [
    # Base interface
    "ICommand",
    # Stock commands
    "StockCommand",
    "IncreaseStockCommand",
    "DecreaseStockCommand",
    # Invoker
    "CommandQueue",
    "QueueState",
]
