"""Console output and logging configuration.

Provides Rich-based console output and logging setup:
    - console: Rich console for stdout (tables, JSON)
    - stderr_console: Rich console for stderr (logs, errors)
    - setup_logging(): Route log records through a Rich handler on stderr

Logs always go to stderr: stdout carries command output and, under
``dependency-mcp serve``, the MCP stdio protocol stream.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
stderr_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure logging with a Rich handler and return the package logger.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=stderr_console,
        markup=False,
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)

    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logging.getLogger("dependency_mcp")
