"""Logging for the command line.

Library modules only call `logging.getLogger(__name__)`; the CLI is the one
place that installs a handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr `RichHandler` to the root logger."""

    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    return root
