from __future__ import annotations

import logging
import os

_LOG = logging.getLogger("spacelint")


def setup_logging(verbose: bool = False) -> None:
    """
    Attach a single stderr handler to the package logger.

    DEBUG is enabled by --verbose or the SPACELINT_DEBUG environment variable.
    Repeated calls only adjust the level.
    """
    level = logging.DEBUG if verbose or os.environ.get("SPACELINT_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)


__all__ = ["setup_logging"]
