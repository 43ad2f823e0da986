"""
Centralized logging configuration for the assistant service.
"""

import logging
import sys
from typing import Optional

from support_assistant.core.config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure the root logger once at process start.

    Args:
        config: Settings instance, uses the module singleton if None
    """
    config = config or default_settings
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str, config: Optional[Settings] = None) -> logging.Logger:
    """
    Get a logger with the configured level.

    Args:
        name: Logger name (usually __name__)
        config: Settings instance, uses the module singleton if None
    """
    config = config or default_settings
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    return logger
