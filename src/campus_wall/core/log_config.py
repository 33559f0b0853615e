"""Logging setup applied once when the API starts."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "campus_wall"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger at the requested level."""
    root = logging.getLogger()
    if not any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
