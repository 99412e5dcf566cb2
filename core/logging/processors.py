"""Custom structlog processors for service metadata and console output."""

import os
import threading

from django.conf import settings

from colorama import Fore, Style, init
from structlog.typing import EventDict, WrappedLogger


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service metadata to all log events.

    Includes:
    - service_name: The name of the service
    - service_version: The deployed version
    - environment: The deployment environment (dev/staging/prod)

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The name of the method called on the logger (unused).
        event_dict: The event dictionary to be logged.

    Returns:
        The event dictionary with service metadata added.
    """
    event_dict["service_name"] = os.getenv("SERVICE_NAME", "bitelogs-api")
    event_dict["service_version"] = getattr(settings, "SERVICE_VERSION", "unknown")
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add process and thread information to log events.

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The name of the method called on the logger (unused).
        event_dict: The event dictionary to be logged.

    Returns:
        The event dictionary with process/thread info added.
    """
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


# Fields rendered in the fixed prefix or hidden from the console
_CONSOLE_EXCLUDED_FIELDS = frozenset(
    {
        "level",
        "timestamp",
        "request_id",
        "logger",
        "event",
        "process_id",
        "thread_id",
        "service_name",
        "service_version",
        "environment",
        "_record",
        "_from_structlog",
    }
)

_LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

init(autoreset=True)


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render log events as colored strings for console output.

    Format: [LEVEL] timestamp | request_id | logger_name | message key=value...

    Args:
        _logger: The wrapped logger instance (unused).
        _method_name: The name of the method called on the logger (unused).
        event_dict: The event dictionary to be logged.

    Returns:
        A formatted, colored string for console output.
    """
    level = str(event_dict.get("level", "INFO")).upper()
    timestamp = event_dict.get("timestamp", "")
    request_id = event_dict.get("request_id", "no-request-id")
    logger_name = event_dict.get("logger", "root")
    message = event_dict.get("event", "")

    level_color = _LEVEL_COLORS.get(level, Fore.WHITE)

    formatted = (
        f"{level_color}[{level:<8}]{Style.RESET_ALL} "
        f"{Fore.WHITE}{timestamp}{Style.RESET_ALL} | "
        f"{Fore.MAGENTA}{request_id}{Style.RESET_ALL} | "
        f"{Fore.BLUE}{logger_name}{Style.RESET_ALL} | "
        f"{message}"
    )

    extra_fields = {
        k: v for k, v in event_dict.items() if k not in _CONSOLE_EXCLUDED_FIELDS
    }
    if extra_fields:
        extra_str = " ".join(f"{k}={v}" for k, v in extra_fields.items())
        formatted += f" {Fore.YELLOW}{extra_str}{Style.RESET_ALL}"

    return formatted
