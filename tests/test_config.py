import json

import pytest
from pydantic import ValidationError

from fruit_shop.config import ConfigManager, ShopConfig


def test_config_defaults_without_file():
    config = ConfigManager()

    assert config.data == ShopConfig()
    assert config.get("logging", "debug_mode") is False
    assert config.get("logging", "log_dir") is None
    assert config.get("output", "stream") == "stdout"


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "shop.json"

    ConfigManager(str(path))

    assert json.loads(path.read_text(encoding="utf-8")) == ShopConfig().model_dump()


def test_load_json(tmp_path):
    path = tmp_path / "shop.json"
    path.write_text(json.dumps({"logging": {"debug_mode": True}, "output": {"stream": "stderr"}}))

    config = ConfigManager(str(path))

    assert config.data.logging.debug_mode is True
    assert config.data.output.stream == "stderr"


def test_load_toml(tmp_path):
    path = tmp_path / "shop.toml"
    path.write_text('[logging]\ndebug_mode = true\nlog_dir = "logs"\n')

    config = ConfigManager(str(path))

    assert config.data.logging.debug_mode is True
    assert config.data.logging.log_dir == "logs"


def test_invalid_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "shop.json"
    original = json.dumps({"output": {"stream": "printer"}})
    path.write_text(original)

    config = ConfigManager(str(path))

    assert config.data == ShopConfig()
    assert "Failed to load config" in caplog.text
    assert path.read_text() == original


def test_unparsable_file_is_left_untouched(tmp_path, caplog):
    path = tmp_path / "shop.json"
    path.write_text('{"logging": {"debug_mode": tru')

    config = ConfigManager(str(path))

    assert config.data == ShopConfig()
    assert path.read_text() == '{"logging": {"debug_mode": tru'
    assert "Failed to load config" in caplog.text


def test_config_update_event(tmp_path):
    path = tmp_path / "shop.json"
    config = ConfigManager(str(path))
    received = []

    def on_change(section, key, val):
        received.append((section, key, val))

    config.on_changed.connect(on_change)

    config.update("output", "stream", "stderr")

    assert config.data.output.stream == "stderr"
    assert received == [("output", "stream", "stderr")]
    assert json.loads(path.read_text(encoding="utf-8"))["output"]["stream"] == "stderr"


def test_update_rejects_unknown_section():
    with pytest.raises(ValueError, match="Invalid section"):
        ConfigManager().update("database", "host", "localhost")


def test_update_rejects_unknown_key():
    with pytest.raises(ValueError, match="Invalid key"):
        ConfigManager().update("logging", "colour", True)


def test_update_validates_value():
    config = ConfigManager()
    received = []
    config.on_changed.connect(lambda *args: received.append(args))

    with pytest.raises(ValidationError):
        config.update("output", "stream", "printer")

    assert config.data.output.stream == "stdout"
    assert received == []
