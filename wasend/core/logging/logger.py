"""
Rich-based logger with sender and recipient context for wasend.

Every WhatsApp operation is scoped to a sending phone number ID (the tenant)
and usually to one recipient. ContextLogger prefixes messages with both so a
console full of concurrent sends stays readable.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wasend.core.config.settings import settings


class CompactFormatter(logging.Formatter):
    """Formatter that shortens long module names for better readability."""

    def format(self, record):
        if record.name.startswith("wasend."):
            parts = record.name.split(".")
            if len(parts) > 2:
                if "whatsapp" in record.name:
                    # wasend.messaging.whatsapp.handlers.whatsapp_media_handler
                    # -> whatsapp.media_handler
                    leaf = parts[-1].removeprefix("whatsapp_")
                    record.name = f"whatsapp.{leaf}"
                else:
                    record.name = ".".join(parts[-2:])

        return super().format(record)


_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
    }
)
_console = Console(theme=_theme)


class ContextLogger:
    """
    Logger wrapper that adds tenant and user context to messages.

    Context is added as a message prefix (``[T:<phone_id>][U:<recipient>]``)
    instead of through the format string, so third-party handlers keep
    working with plain formats.
    """

    def __init__(
        self,
        logger: logging.Logger,
        tenant_id: str | None = None,
        user_id: str | None = None,
    ):
        self.logger = logger
        self.tenant_id = tenant_id or "---"
        self.user_id = user_id or "---"

    def _format_message(self, message: str) -> str:
        """Add context prefix to message."""
        if self.tenant_id != "---":
            if self.user_id != "---":
                return f"[T:{self.tenant_id}][U:{self.user_id}] {message}"
            return f"[T:{self.tenant_id}] {message}"
        if self.user_id != "---":
            return f"[U:{self.user_id}] {message}"
        return message

    def debug(self, message: str, *args, **kwargs) -> None:
        self.logger.debug(self._format_message(message), *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(self._format_message(message), *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.logger.error(self._format_message(message), *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        self.logger.exception(self._format_message(message), *args, **kwargs)

    def bind(self, **kwargs) -> ContextLogger:
        """
        Create a new ContextLogger with additional or updated context.

        Follows the Loguru-style bind pattern: the current logger is left
        untouched and a new instance is returned.

        Args:
            **kwargs: Context fields to bind:
                - tenant_id: sending phone number ID
                - user_id: recipient identifier

        Returns:
            New ContextLogger instance with updated context

        Example:
            send_logger = logger.bind(user_id="5215512345678")
        """
        new_tenant_id = kwargs.get("tenant_id", self.tenant_id)
        new_user_id = kwargs.get("user_id", self.user_id)
        return ContextLogger(self.logger, tenant_id=new_tenant_id, user_id=new_user_id)


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Initialize the root logger with Rich formatting.

    Parameters
    ----------
    level : str
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
    mode : str
        "DEV" creates daily log files + console; anything else → console only
    log_dir : str, optional
        Directory for log files (DEV mode only)
    console_fmt : str, optional
        Console format string
    file_fmt : str, optional
        File format string
    """
    lvl = level.upper()
    lvl = lvl if lvl in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"

    # RichHandler already shows level and time
    console_format = console_fmt or "[%(name)s] %(message)s"
    file_format = file_fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    rich_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    rich_handler.setFormatter(CompactFormatter(console_format))

    handlers: list[logging.Handler] = [rich_handler]

    if mode.upper() == "DEV" and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, f"wasend_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(CompactFormatter(file_format))
        handlers.append(file_handler)

    logging.basicConfig(level=lvl, handlers=handlers, force=True)

    # aiohttp is chatty at DEBUG
    logging.getLogger("aiohttp").setLevel(max(logging.getLevelName(lvl), logging.INFO))

    logging.getLogger("wasend.setup").debug(f"Logging initialized ({lvl}, {mode})")


def setup_app_logging() -> None:
    """Initialize logging from the global settings."""
    setup_logging(
        level=settings.log_level,
        mode="DEV" if settings.is_development else "PROD",
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(
    name: str, tenant_id: str | None = None, user_id: str | None = None
) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name (usually __name__)
        tenant_id: Optional sending phone number ID
        user_id: Optional recipient identifier

    Returns:
        ContextLogger instance
    """
    return ContextLogger(logging.getLogger(name), tenant_id=tenant_id, user_id=user_id)
