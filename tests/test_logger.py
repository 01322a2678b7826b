import logging
import os
import sys
import pytest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from smczones.utils.logger import setup_logger, resolve_level


@pytest.fixture
def logger_name():
    name = "SMCZonesTest"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_level_names():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" WARNING ") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR

    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_file_handler_writes(tmp_path, logger_name):
    log_file = tmp_path / "zones.log"
    logger = setup_logger(logger_name, "INFO", str(log_file))
    logger.getChild("Scanner").info("New BULLISH FVG zone fvg-bull-2")

    for handler in logger.handlers:
        handler.flush()
    text = log_file.read_text()
    assert f"{logger_name}.Scanner - INFO - New BULLISH FVG zone fvg-bull-2" in text


def test_repeated_setup_replaces_handlers(tmp_path, logger_name):
    setup_logger(logger_name, "INFO", str(tmp_path / "a.log"))
    logger = setup_logger(logger_name, "DEBUG")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
