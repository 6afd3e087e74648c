"""
Logging utilities for the Invoice dApp.

All module loggers are children of the ``invoice_dapp`` logger, which owns
the only handler. Levels and formatting are therefore set in one place and
records still propagate to the root logger.
"""

import logging
import os
from pathlib import Path

ROOT_NAME = "invoice_dapp"


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the package logger for a module.

    Args:
        name: Logger name or __file__ path; paths are reduced to the file stem.

    Returns:
        Logger named ``invoice_dapp.<name>``.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    return _root().getChild(name)
