import logging
import os
import sys

PACKAGE_LOGGER = "uptag"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    # module loggers (`uptag.clients...`) propagate to the same package handler
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(handler.name == PACKAGE_LOGGER for handler in package_logger.handlers):
        # stdout is reserved for the report
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(PACKAGE_LOGGER)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.propagate = False
    package_logger.setLevel((level or os.environ.get("UPTAG_LOG_LEVEL", "INFO")).upper())
    return package_logger.getChild(name)
