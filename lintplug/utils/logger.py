"""Logging utilities with access-token redaction."""

import re
import sys
from typing import Optional
from loguru import logger
from lintplug.models import get_settings


class SecretRedactor:
    """Redacts credentials from log messages."""

    # Patterns for tokens that may end up in request logs
    PATTERNS = {
        "github_token": r"\b(?:ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b",
        "github_pat": r"\bgithub_pat_[A-Za-z0-9_]{20,}\b",
        "bearer": r"(?<=Bearer )[A-Za-z0-9._~+/=-]+",
    }

    @classmethod
    def redact(cls, message: str) -> str:
        """
        Redact secrets from a message.

        Args:
            message: Log message to redact

        Returns:
            Message with secrets replaced with [REDACTED_{TYPE}]
        """
        redacted = message

        for secret_type, pattern in cls.PATTERNS.items():
            redacted = re.sub(pattern, f"[REDACTED_{secret_type.upper()}]", redacted)

        return redacted


def redaction_filter(record: dict) -> bool:
    """
    Filter function for loguru that redacts secrets.

    Args:
        record: Log record dictionary

    Returns:
        True (always log, but modify the record)
    """
    try:
        settings = get_settings()
    except ValueError:
        # Unreadable environment; redact rather than leak
        record["message"] = SecretRedactor.redact(record["message"])
        return True

    if settings.redact_secrets:
        record["message"] = SecretRedactor.redact(record["message"])

    return True


def setup_logging(log_file: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """
    Configure logging with secret redaction.

    Args:
        log_file: Path to log file (optional)
        log_level: Log level (default: from settings)
    """
    settings = get_settings()
    log_level = log_level or settings.log_level
    log_file = log_file or settings.log_file

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level.upper(),
        colorize=True,
        filter=redaction_filter,
    )

    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=log_level.upper(),
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            filter=redaction_filter,
        )

    logger.debug(f"Logging initialized at level {log_level.upper()}")


def get_logger(name: str):
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)
