"""
Logging setup for the blog service.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and the
optional ``LOG_FILE`` from ``Settings``.  Modules log through
``logging.getLogger(__name__)``; the blog service reports mutations at
INFO, rejected ownership checks at WARNING and store faults at ERROR
with tracebacks, so ``LOG_LEVEL=WARNING`` keeps only problems.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    target: Optional[logging.Logger] = None,
) -> None:
    """Attach console (and optionally file) handlers to the root logger.

    Does nothing if the root logger already has handlers, e.g. when a
    test runner configured logging first or ``create_app`` runs more
    than once.  Unknown level names fall back to ``INFO``.  ``logfile``
    is resolved against the working directory.
    ``target`` configures another logger instead of the root logger.
    """
    logger = target if target is not None else logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
