from __future__ import annotations

import logging

HEALTH_PATHS = frozenset({"/", "/healthz", "/ping", "/openapi.json"})


def _access_path(record: logging.LogRecord) -> str:
    # uvicorn.access args: (client_addr, method, full_path, http_version, status_code)
    args = record.args
    if not isinstance(args, tuple) or len(args) < 3:
        return ""
    path = str(args[2]).split("?", 1)[0]
    return path.rstrip("/") or "/"


def skip_health_checks(record: logging.LogRecord) -> bool:
    """Access-log filter that drops polling of the health routes."""
    return _access_path(record) not in HEALTH_PATHS


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    access_logger = logging.getLogger("uvicorn.access")
    if skip_health_checks not in access_logger.filters:
        access_logger.addFilter(skip_health_checks)
