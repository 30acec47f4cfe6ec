# app/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "app-stream"

def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach one stream handler to the "app" logger.
    Safe to call more than once (e.g. one call per create_app()).
    """
    logger = logging.getLogger("app")
    logger.setLevel(level.upper())

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
