import logging

import pytest

from social_media_api.app.core.config import Settings
from social_media_api.app.core.logging_config import ACCESS_LOGGER, HANDLER_NAME, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    access = logging.getLogger(ACCESS_LOGGER)
    handlers, level, access_level = list(root.handlers), root.level, access.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    access.setLevel(access_level)


def own_handlers(root):
    return [h for h in root.handlers if (h.get_name() or "").startswith(HANDLER_NAME)]


def test_levels_follow_settings(root_logger):
    setup_logging(Settings(log_level="debug", access_log_level="WARNING"))
    assert root_logger.level == logging.DEBUG
    assert logging.getLogger(ACCESS_LOGGER).level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging(Settings(log_level="chatty", access_log_level="INFO"))
    assert root_logger.level == logging.INFO


def test_repeated_setup_does_not_stack_handlers(root_logger, tmp_path):
    app_settings = Settings(log_file=str(tmp_path / "app.log"))
    setup_logging(app_settings)
    first = own_handlers(root_logger)
    setup_logging(app_settings)
    assert own_handlers(root_logger) == first
    assert any(isinstance(h, logging.FileHandler) for h in first)


def test_access_log_reaches_file(root_logger, tmp_path):
    log_file = tmp_path / "access.log"
    setup_logging(Settings(log_file=str(log_file), access_log_level="INFO"))
    logging.getLogger(ACCESS_LOGGER).info("GET /messages -> 200 (1.00 ms)")
    for handler in own_handlers(root_logger):
        handler.flush()
    assert "social_media_api.access: GET /messages -> 200" in log_file.read_text(encoding="utf-8")
