from typing import Any, Literal, Optional
import json
import os
from pydantic import BaseModel, ConfigDict, Field
from loguru import logger
from .events import ConfigSignal

# --- Settings Models ---
class LoggingSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    debug_mode: bool = False
    log_dir: Optional[str] = None  # No file log when unset

class OutputSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    stream: Literal["stdout", "stderr"] = "stdout"

class ShopConfig(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages shop configuration with optional persistence and change notification.

    With no filepath the defaults are used and nothing touches the disk.
    """
    def __init__(self, filepath: Optional[str] = None):
        self.filepath = filepath
        self._data = ShopConfig()
        self.on_changed = ConfigSignal("ConfigChanged")
        if self.filepath:
            self._load()

    @property
    def data(self) -> ShopConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        setattr(section_obj, key, value)
        self._save()
        self.on_changed.emit(section, key, getattr(section_obj, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = ShopConfig.model_validate(raw)
            except Exception as e:
                # The broken file is left untouched
                logger.error(f"Failed to load config from {self.filepath}, using defaults: {e}")
                self._data = ShopConfig()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if not self.filepath or self.filepath.endswith('.toml'):
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
