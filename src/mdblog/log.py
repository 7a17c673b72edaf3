"""Package logger shared by the pipeline and the CLI"""

import logging
import sys


logger = logging.getLogger("mdblog")


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level."""
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(handler)
    return logger
