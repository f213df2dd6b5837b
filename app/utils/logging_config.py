"""
Logging setup. The service logs through the root logger with one console
handler; uvicorn's own loggers are pointed at the same handler so startup,
request and application lines share one format and one level.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
HANDLER_NAME = "carrier-registry-console"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Level name to number; unknown names fall back to INFO."""
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO") -> logging.Handler:
    """
    Apply `level` to the root logger and make sure the console handler is
    attached exactly once. Safe to call on every app startup.
    """
    numeric = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(numeric)

    handler = next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uv = logging.getLogger(name)
        uv.handlers = [handler]
        uv.setLevel(numeric)
        uv.propagate = False
    return handler
