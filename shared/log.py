"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this installs a single
rich handler on the root logger so the output is readable in a terminal.
"""

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Install the rich handler on the root logger (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
