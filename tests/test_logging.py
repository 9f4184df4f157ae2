from loguru import logger

from fruit_shop.logging import setup_logging


def test_setup_logging_writes_to_stderr(capsys):
    setup_logging(debug_mode=True)

    logger.debug("debug visible")

    captured = capsys.readouterr()
    assert "debug visible" in captured.err
    assert captured.out == ""


def test_info_level_hides_debug(capsys):
    setup_logging(debug_mode=False)

    logger.debug("hidden")
    logger.info("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_log_dir_adds_file_handler(tmp_path):
    log_dir = tmp_path / "logs"

    setup_logging(debug_mode=False, log_dir=str(log_dir))
    logger.debug("to file")
    logger.remove()

    files = list(log_dir.glob("fruit_shop_*.log"))
    assert len(files) == 1
    assert "to file" in files[0].read_text(encoding="utf-8")
