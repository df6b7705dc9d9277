"""Root logger setup shared by the HTTP server and the CLI."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Install a single stderr handler on the root logger.

    Only the first call attaches the handler; later calls just adjust
    the level.
    """
    global _CONFIGURED  # noqa: PLW0603
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _CONFIGURED:
        return
    _CONFIGURED = True

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
