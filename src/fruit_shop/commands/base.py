"""
Command Pattern - Base Interface.

Provides:
- ICommand: a single parameterless operation, bound to its arguments at
  construction and executed later by a CommandQueue
"""
from abc import ABC, abstractmethod


class ICommand(ABC):
    """
    Interface for commands executed by CommandQueue.

    The queue only ever calls execute(), so any subclass can be queued
    without changes to the queue or the store.

    Example:
        class RestockCommand(ICommand):
            def __init__(self, store, item):
                self.store = store
                self.item = item

            @property
            def description(self) -> str:
                return f"Restock {self.item}"

            def execute(self):
                self.store.increase(self.item, 100)
    """

    @property
    def description(self) -> str:
        """
        Human-readable description for logs.

        Returns:
            Description string (default: class name)
        """
        return self.__class__.__name__

    @abstractmethod
    def execute(self) -> None:
        """
        Perform the operation.

        Not idempotent: executing twice applies the effect twice.
        """
        pass
