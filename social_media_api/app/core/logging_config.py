"""
Logging setup driven by ``Settings``.

The root logger gets one console handler and, when ``log_file`` is
set, a file handler.  Both are tagged with ``HANDLER_NAME`` so a second
``create_app`` in the same process (every API test builds one) does not
stack duplicates, while handlers installed by others (pytest's capture
handler, an embedding server) are left alone.

Levels are re-applied on every call: the root logger follows
``log_level`` and the access logger used by ``core.middleware`` follows
``access_log_level``.  Uvicorn's own access logger is turned down to
WARNING because the middleware already writes one line per request
with the latency included.
"""

import logging
from pathlib import Path

from .config import Settings


ACCESS_LOGGER = "social_media_api.access"
HANDLER_NAME = "social_media_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(app_settings: Settings) -> None:
    """Apply the logging part of ``app_settings`` to the process."""
    root = logging.getLogger()
    root.setLevel(_level(app_settings.log_level))
    logging.getLogger(ACCESS_LOGGER).setLevel(_level(app_settings.access_log_level))
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if app_settings.log_file:
        file_name = f"{HANDLER_NAME}:{Path(app_settings.log_file).resolve()}"
        if file_name not in installed:
            file_handler = logging.FileHandler(
                Path(app_settings.log_file).resolve(), encoding="utf-8"
            )
            file_handler.set_name(file_name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
