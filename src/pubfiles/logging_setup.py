"""Console logging with Rich.

``setup_logging()`` is safe to call more than once; only the first call
installs the handler.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Install a RichHandler on the root logger."""
    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper())
    if _configured:
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
