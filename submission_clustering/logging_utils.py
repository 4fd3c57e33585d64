"""Logging setup for applications embedding the clustering engine.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are configured by the application, e.g. with setup_logging().
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging with a timestamped format.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
