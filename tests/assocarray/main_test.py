import logging

import pytest

from assocarray import logconfig, main


@pytest.fixture(autouse=True)
def fresh_logging(monkeypatch):
    monkeypatch.setattr(main, "_logging_is_configured", False)
    logger = logging.getLogger(logconfig.LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers = handlers


def test_init_configures_logger():
    main.init(level="INFO")
    assert logging.INFO == logging.getLogger(logconfig.LOGGER_NAME).level


def test_init_only_configures_once():
    main.init(level="INFO")
    main.init(level="DEBUG")
    logger = logging.getLogger(logconfig.LOGGER_NAME)
    assert logging.INFO == logger.level


def test_init_force_reload():
    main.init(level="INFO")
    main.init(level="DEBUG", force_reload=True)
    logger = logging.getLogger(logconfig.LOGGER_NAME)
    assert logging.DEBUG == logger.level
    assert 1 == len([h for h in logger.handlers if h is logconfig._installed_handler])
