"""
Logging setup shared by both services.
"""
import logging
import os
import sys

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging() -> None:
    """Log to stdout and, when LOG_DIR is set and writable, to a file as well."""
    handlers = [logging.StreamHandler(sys.stdout)]

    log_dir = settings.LOG_DIR
    if log_dir:
        # Continue without the file handler if the directory is unusable
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, "catalog_platform.log")))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers
    )
