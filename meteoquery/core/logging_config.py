"""JSON logging for the API process."""

from __future__ import annotations

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

from meteoquery.core.config import settings

# Chatty per-request loggers of the HTTP stack.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")

_CONFIGURED = False


class _ServiceNameFilter(logging.Filter):
    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service_name
        return True


def build_handler(service_name: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(service)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )
    )
    handler.addFilter(_ServiceNameFilter(service_name))
    return handler


def setup_logging(
    service_name: Optional[str] = None,
    level: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """Send every record through one JSON handler tagged with the service name.

    Service name and level default to ``settings.app_name`` and
    ``settings.log_level``. Upstream request lines from httpx only show at DEBUG.
    """

    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    log_level = (level or settings.log_level).upper()
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(build_handler(service_name or settings.app_name.lower()))
    root.setLevel(log_level)

    transport_level = logging.DEBUG if log_level == "DEBUG" else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    logging.captureWarnings(True)
    _CONFIGURED = True


__all__ = ["build_handler", "setup_logging"]
