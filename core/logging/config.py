"""Structlog configuration for dual output: JSON files and colored console."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from core.logging.filters import RequestIDFilter
from core.logging.processors import (
    add_process_info,
    add_service_context,
    console_renderer,
)

LOG_FILE_MAX_BYTES = 100 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 240


def _shared_processors() -> list[structlog.typing.Processor]:
    """Processors applied to structlog events and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_context,
        add_process_info,
    ]


def setup_logging() -> None:
    """Configure structlog with dual output: JSON file logs and colored console logs.

    File Output:
    - JSON formatted with all metadata
    - Rotating file handler (100MB per file, 240 backups)

    Console Output:
    - Format: [LEVEL] timestamp | request_id | logger_name | message

    Request context (request_id, client_ip, method, path) bound by the
    request middleware is merged into every event through contextvars.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/bitelogs-api.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - SERVICE_NAME: Service name for metadata (default: bitelogs-api)
    - ENVIRONMENT: Deployment environment (default: development)
    """
    log_file_path = os.getenv("LOG_FILE_PATH", "./logs/bitelogs-api.log")
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
            foreign_pre_chain=[
                *_shared_processors(),
                structlog.processors.format_exc_info,
            ],
        )
    )

    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_shared_processors(),
        )
    )

    request_id_filter = RequestIDFilter()
    file_handler.addFilter(request_id_filter)
    console_handler.addFilter(request_id_filter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(log_level)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_file=log_file_path,
        log_level=log_level_name,
        max_file_size_mb=LOG_FILE_MAX_BYTES // (1024 * 1024),
    )
