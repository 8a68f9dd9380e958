from __future__ import annotations

import logging
import os
import sys

_ROOT_NAME = "codicon_inspector"
_FORMAT = "%(levelname)s %(name)s: %(message)s"
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    level_name = os.environ.get("CODICON_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package root, installing the handler once."""

    _configure_root()
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Switch the package logger to DEBUG (verbose) or back to INFO."""

    _configure_root()
    logging.getLogger(_ROOT_NAME).setLevel(logging.DEBUG if verbose else logging.INFO)
