"""Logging setup shared by the service entrypoint and tests."""

import logging
import sys


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach a stdout handler to the root logger.

    Args:
        level: Logging level, either a ``logging`` constant or its name.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=handlers,
        force=True,
    )
