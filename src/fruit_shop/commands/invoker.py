"""
Command Queue - the invoker.

Collects commands and executes them in submission order when drained.
"""
from enum import Enum
from typing import List, Tuple

from loguru import logger

from .base import ICommand


class QueueState(Enum):
    """Observable states of a CommandQueue."""
    EMPTY = "empty"
    PENDING = "pending"


class CommandQueue:
    """
    FIFO queue of ICommands.

    The queue has no knowledge of what a command does; it only calls
    execute() on each one, once, in the order they were enqueued.

    Usage:
        queue = CommandQueue()
        queue.enqueue(IncreaseStockCommand(store, "Apples", 10))
        queue.enqueue(DecreaseStockCommand(store, "Apples", 3))
        queue.execute_all()   # runs both, queue is empty afterwards
    """

    def __init__(self):
        self._pending: List[ICommand] = []

    @property
    def pending(self) -> Tuple[ICommand, ...]:
        """Commands waiting to run, oldest first."""
        return tuple(self._pending)

    @property
    def state(self) -> QueueState:
        return QueueState.PENDING if self._pending else QueueState.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def enqueue(self, command: ICommand) -> None:
        """
        Append a command to the end of the queue.

        Args:
            command: Command to run on the next execute_all()

        Raises:
            TypeError: If command is not an ICommand
        """
        if not isinstance(command, ICommand):
            raise TypeError(f"Expected ICommand, got {type(command).__name__}")
        self._pending.append(command)
        logger.debug(f"Queued: {command.description} ({len(self._pending)} pending)")

    def execute_all(self) -> None:
        """
        Execute every pending command in FIFO order, then leave the queue empty.

        The batch is taken off the queue before it runs, so commands
        enqueued meanwhile wait for the next call. If a command raises,
        the error is logged and re-raised and the rest of the batch is
        dropped; nothing already applied is rolled back.
        """
        batch, self._pending = self._pending, []
        if not batch:
            return

        logger.debug(f"Executing {len(batch)} queued command(s)")
        for command in batch:
            try:
                command.execute()
            except Exception as e:
                logger.error(f"Command execution failed: {command.description}: {e}")
                raise
            logger.debug(f"Executed: {command.description}")
