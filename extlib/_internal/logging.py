# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Console logging for extlib using Python's standard logging with Rich.

Modules log through ``logging.getLogger(__name__)``. setup_logging() only
decides how verbose the 'extlib' logger tree is and gives it a Rich console
handler; the root logger and other libraries' loggers are left alone.

Usage:
    from extlib._internal.logging import setup_logging

    setup_logging(level="info")
"""

import logging

from rich.logging import RichHandler

LOGGER_NAME = 'extlib'

LEVEL_MAP = {
    'error': logging.ERROR,
    'warning': logging.WARNING,
    'info': logging.INFO,
    'debug': logging.DEBUG
}


def setup_logging(level: str = "warning") -> logging.Logger:
    """Attach a Rich console handler to the extlib logger.

    Maps string level ('error', 'warning', 'info', 'debug') to logging
    constants; unknown levels fall back to WARNING. Calling it again only
    changes the level.

    Returns:
        The configured 'extlib' logger
    """
    log_level = LEVEL_MAP.get(level.lower(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    console_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    if not console_handlers:
        handler = RichHandler(
            rich_tracebacks=(log_level == logging.DEBUG),
            show_path=False,
            markup=False,
            show_time=False
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        console_handlers = [handler]

    for handler in console_handlers:
        handler.setLevel(log_level)
    return logger
