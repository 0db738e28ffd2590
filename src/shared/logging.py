"""
Logging Configuration - Shared Layer

This module configures structlog on top of the standard logging module so
that application events and third-party library records share one output.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# httpx logs every request at INFO; the gateway already emits its own events
NOISY_LOGGERS = ("httpx", "httpcore")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """
    Get logging configuration from environment variables.

    Used for the bootstrap configuration, before settings are loaded.
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _build_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure structlog and the root logger.

    Console output is always enabled; a file handler is added when a path
    is given. Production renders JSON lines, other environments render for
    the console.

    Args:
        level: Optional override for the log level.
        format_string: Accepted for settings compatibility; rendering is
            done by structlog.
        file_path: Optional override for log file path.
        environment: Application environment (development, production, etc.)
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_file = file_path or env_config["file_path"]
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    library_level = max(numeric_level, logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    logging.info(f"Logging configured with level: {log_level}")
    if log_file:
        logging.info(f"Logging to file: {log_file}")


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: The application settings object from Pydantic.
    """
    try:
        log_level = (
            settings.logging.level.value
            if hasattr(settings.logging.level, "value")
            else settings.logging.level
        )
        environment = (
            settings.environment.value
            if hasattr(settings.environment, "value")
            else settings.environment
        )

        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )

        logging.info("Logging configuration updated from application settings")
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
