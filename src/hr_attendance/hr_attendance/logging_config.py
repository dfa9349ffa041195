import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Basic logging setup for the whole application."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
