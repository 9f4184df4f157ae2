"""
Config change notification.

ConfigManager emits (section, key, value) after every validated update.
Subscribers may listen to one section or to all of them.
"""
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from loguru import logger

ConfigListener = Callable[[str, str, object], None]


class ConfigSignal:
    """
    Synchronous dispatcher for config changes.

    Usage:
        signal = ConfigSignal("ConfigChanged")
        signal.connect(on_output_change, section="output")
        signal.connect(on_any_change)
        signal.emit("output", "stream", "stderr")   # both are called
    """

    def __init__(self, name: str = "ConfigSignal"):
        self.name = name
        # None holds listeners for every section
        self._listeners: Dict[Optional[str], List[ConfigListener]] = defaultdict(list)

    def connect(self, callback: ConfigListener, section: Optional[str] = None) -> ConfigListener:
        """
        Subscribe to changes of one section, or of all sections when None.

        Connecting the same callback to the same section twice has no effect.
        Returns the callback so it can be kept for disconnect().
        """
        listeners = self._listeners[section]
        if callback not in listeners:
            listeners.append(callback)
        return callback

    def disconnect(self, callback: ConfigListener, section: Optional[str] = None) -> None:
        listeners = self._listeners.get(section, [])
        if callback in listeners:
            listeners.remove(callback)

    def listener_count(self, section: Optional[str] = None) -> int:
        return len(self._listeners.get(section, []))

    def emit(self, section: str, key: str, value) -> None:
        """
        Notify section listeners first, then catch-all listeners.

        A failing listener is logged and the others still run.
        """
        targets = list(self._listeners.get(section, [])) + list(self._listeners.get(None, []))
        for listener in targets:
            try:
                listener(section, key, value)
            except Exception as e:
                logger.error(f"{self.name}: listener {listener!r} failed on {section}.{key}: {e}")
