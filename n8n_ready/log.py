"""Logging setup for the n8n-ready CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Diagnostics go to stderr; stdout carries the operator-facing output
console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("n8n_ready")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, console=console, show_path=verbose)
        formatter = logging.Formatter("%(message)s", datefmt="[%X]")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger
