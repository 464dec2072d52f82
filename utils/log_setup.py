"""
Logging setup for a single HOOKSMITH run.

Operator-facing output goes through cli.ui (rich console); the standard
logging tree is written to a log file so a failed run can be inspected
afterwards.
"""

import logging
import os
from typing import Optional

from config import LOG_FILE

LOG_FORMAT = '%(asctime)s %(levelname)s %(process)d %(name)s: %(message)s'


def setup_logging(app_name: str = "hooksmith", loglevel: int = logging.INFO,
                  logfile: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger with a file handler and return it.
    Logs go to ~/.hooksmith/log.txt unless logfile is given.
    Falls back to stderr when the log file cannot be opened.
    """
    logger = logging.getLogger()
    logger.setLevel(loglevel)

    logfile = str(logfile or LOG_FILE)
    formatter = logging.Formatter(LOG_FORMAT)
    try:
        os.makedirs(os.path.dirname(os.path.abspath(logfile)), exist_ok=True)
        handler: logging.Handler = logging.FileHandler(logfile, encoding='utf-8')
    except OSError:
        handler = logging.StreamHandler()
        handler.setLevel(logging.WARNING)

    # Remove any existing handlers
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.debug("Logging initialized for %s: %s", app_name, logfile)
    return logger
