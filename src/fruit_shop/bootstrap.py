"""
Bootstrap helpers for the fruit shop.

Wires configuration, logging, an output sink, the store and the command
queue together.
"""
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from loguru import logger

from .commands import CommandQueue, DecreaseStockCommand, IncreaseStockCommand
from .config import ConfigManager
from .logging import setup_logging
from .output import ConsoleSink, OutputSink
from .stock import InventoryStore


@dataclass
class FruitShop:
    """
    A built shop: one store, one command queue and the config they came from.

    buy()/sell() only queue commands; nothing changes until process().
    """
    store: InventoryStore
    queue: CommandQueue
    config: ConfigManager

    def buy(self, item: str, quantity: int) -> IncreaseStockCommand:
        command = IncreaseStockCommand(self.store, item, quantity)
        self.queue.enqueue(command)
        return command

    def sell(self, item: str, quantity: int) -> DecreaseStockCommand:
        command = DecreaseStockCommand(self.store, item, quantity)
        self.queue.enqueue(command)
        return command

    def process(self) -> None:
        self.queue.execute_all()

    def display(self) -> None:
        self.store.display()


class ShopBuilder:
    """
    Fluent builder for a FruitShop.

    Example:
        shop = (ShopBuilder("shop.json")
                .with_sink(CollectingSink())
                .build())
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize shop builder.

        Args:
            config_path: Path to a JSON or TOML config file (defaults only when None)
        """
        self.config_path = config_path
        self._sink: Optional[OutputSink] = None
        self._configure_logging = True

    def with_sink(self, sink: OutputSink):
        """Send shop output to sink instead of the configured stream."""
        self._sink = sink
        return self

    def with_logging(self, enable: bool = True):
        """
        Enable or disable loguru setup during build().

        Disable it when the host application already configured loguru.
        """
        self._configure_logging = enable
        return self

    def build(self) -> FruitShop:
        config = ConfigManager(self.config_path)

        if self._configure_logging:
            self._apply_logging(config)
            config.on_changed.connect(lambda *_: self._apply_logging(config), section="logging")

        sink = self._sink
        if sink is None:
            console = ConsoleSink(_resolve_stream(config.data.output.stream))

            def on_output_changed(section, key, value):
                if key == "stream":
                    console.stream = _resolve_stream(value)
                    logger.debug(f"Shop output redirected to {value}")

            config.on_changed.connect(on_output_changed, section="output")
            sink = console

        shop = FruitShop(store=InventoryStore(sink), queue=CommandQueue(), config=config)
        logger.debug("Fruit shop ready")
        return shop

    @staticmethod
    def _apply_logging(config: ConfigManager) -> None:
        settings = config.data.logging
        setup_logging(debug_mode=settings.debug_mode, log_dir=settings.log_dir)


def _resolve_stream(name: str) -> Optional[TextIO]:
    # None makes ConsoleSink look up sys.stdout at write time
    return sys.stderr if name == "stderr" else None
