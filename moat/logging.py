"""
Structured logging for the mock registry.

Use this in place of :func:`logging.getLogger`:

.. code-block:: python

   from moat import logging
   logger = logging.getLogger(__name__)

Records are written as JSON objects. Extra context passed with ``extra=`` is
merged into the object, so request details can be logged as fields rather
than interpolated into the message.
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

ROOT = 'moat'
FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'

_configured = False


def _level(value: Optional[str]) -> int:
    if value is None:
        return logging.DEBUG
    if value.isdigit():
        return int(value)
    return logging.getLevelName(value.upper())  # type: ignore


def setup_logger(level: Optional[str] = None,
                 logfile: Optional[str] = None) -> logging.Logger:
    """
    Attach a JSON handler to the package logger.

    Parameters
    ----------
    level : str
        Numeric or named level. Defaults to ``LOGLEVEL`` from the environment,
        then DEBUG.
    logfile : str
        If given (or ``LOGFILE`` is set), records are also appended here.

    Returns
    -------
    :class:`logging.Logger`
        The package logger.

    """
    global _configured
    logger = logging.getLogger(ROOT)
    formatter = JsonFormatter(
        FORMAT,
        rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
    )
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler: logging.Handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logfile = logfile or os.environ.get('LOGFILE')
    if logfile:
        file_handler = logging.FileHandler(logfile)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(_level(level or os.environ.get('LOGLEVEL')))
    logger.propagate = False
    _configured = True
    return logger


def getLogger(name: str) -> logging.Logger:
    """Get a logger that writes through the package JSON handler."""
    if not _configured:
        setup_logger()
    if not name.startswith(ROOT):
        name = f'{ROOT}.{name}'
    return logging.getLogger(name)
