"""Logging setup shared by the CLI entrypoints."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger("memokit")
    root.setLevel(level)
    if not any(getattr(h, "_memokit", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._memokit = True  # type: ignore[attr-defined]
        root.addHandler(handler)
