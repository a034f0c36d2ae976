"""Logging setup for config-selector.

The library only creates loggers under the "configselector" namespace; the
CLI is the one place that installs a handler.
"""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, format_string: Optional[str] = None) -> logging.Logger:
    """
    Install a stderr handler and set the level of the configselector loggers.
    
    Called by the CLI; applications embedding the selector configure
    logging themselves.
    
    Args:
        level: Level for the configselector loggers (default: INFO)
        format_string: Custom format string (optional)
    
    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    logger = logging.getLogger("configselector")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the configselector namespace, e.g. get_logger("selector.places")."""
    return logging.getLogger(f"configselector.{name}")
