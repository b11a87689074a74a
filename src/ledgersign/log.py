"""
Structured logging setup for ledgersign.

Library modules only call structlog.get_logger(__name__); applications
decide once, through these helpers, how the events are rendered.
"""

import logging
import sys
from typing import List

import structlog

from ledgersign.config import SigningConfig


def resolve_level(level: str) -> int:
    """
    Translate a level name such as "debug" into its logging constant.
    
    Raises:
        ValueError: If the name is not a standard logging level
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def build_processors(json_format: bool = False) -> List:
    """Processor chain shared by console and JSON output."""
    renderer = structlog.processors.JSONRenderer() if json_format else structlog.dev.ConsoleRenderer()
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Route ledgersign events through stdlib logging.
    
    Args:
        level: Minimum level name for the "ledgersign" logger
        json_format: Render events as JSON lines instead of console text
    """
    numeric_level = resolve_level(level)
    
    structlog.configure(
        processors=build_processors(json_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("ledgersign").setLevel(numeric_level)


def setup_logging_from_config(config: SigningConfig) -> None:
    """Apply the logging settings carried by a SigningConfig."""
    setup_logging(level=config.log_level, json_format=config.log_json)
