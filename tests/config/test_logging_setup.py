import logging

import pytest

from rpgm_decrypter.config.loader import ConfigError
from rpgm_decrypter.config.logging_setup import setup_logging


@pytest.mark.unit
def test_setup_logging_console(restore_logging):
    setup_logging({"logging": {"level": "DEBUG", "console": True}})

    root = restore_logging
    assert root.level == logging.DEBUG
    assert any(type(h) is logging.StreamHandler for h in root.handlers)


@pytest.mark.unit
def test_setup_logging_writes_file(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "decrypter.log"

    setup_logging({"logging": {"level": "INFO", "console": False, "file": str(log_file)}})
    logging.getLogger("rpgm_decrypter.test").info("hello from test")
    for handler in restore_logging.handlers:
        handler.flush()

    assert log_file.exists()
    assert "hello from test" in log_file.read_text()
    assert not any(type(h) is logging.StreamHandler for h in restore_logging.handlers)


@pytest.mark.unit
def test_setup_logging_without_handlers(restore_logging):
    setup_logging({"logging": {"console": False}})

    assert all(isinstance(h, logging.NullHandler) for h in restore_logging.handlers)


@pytest.mark.unit
def test_setup_logging_unknown_level_defaults_to_info(restore_logging):
    setup_logging({"logging": {"level": "chatty"}})
    assert restore_logging.level == logging.INFO


@pytest.mark.unit
def test_setup_logging_bad_file_raises(tmp_path, restore_logging, mocker):
    mocker.patch("logging.FileHandler", side_effect=PermissionError("denied"))

    with pytest.raises(ConfigError, match="Could not create log file"):
        setup_logging({"logging": {"file": str(tmp_path / "x.log")}})
