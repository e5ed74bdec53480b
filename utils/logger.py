"""Logging configuration."""
import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level="INFO"):
    """Configure the hashcalc logger with a rich console handler on stderr."""
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)

    root = logging.getLogger("hashcalc")
    root.setLevel(numeric_level)

    if not root.handlers:
        console_handler = RichHandler(
            level=numeric_level, console=Console(stderr=True), show_path=False, markup=True,
        )
        root.addHandler(console_handler)
    else:
        for handler in root.handlers:
            handler.setLevel(numeric_level)

    return root
