import logging
import os

from rich.console import Console
from rich.logging import RichHandler

HAND_SIZE = 10
FLUSH_SIZE = 5
STRAIGHT_LENGTH = 5

# POKERHAND_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL = os.getenv("POKERHAND_LOG_LEVEL", "WARNING").upper()
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start. Log records go to stderr so stdout stays clean."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
