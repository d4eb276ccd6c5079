"""Structured logging setup for ripbullets.

Logs are JSON lines in a file so that stdout stays reserved for the
markdown that ``ripbullets convert`` prints.
"""

import structlog
from pathlib import Path
from typing import Any, Optional
import os


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "INFO"


def default_log_file() -> Path:
    """Log file location: $RIPBULLETS_LOG_FILE or ~/.cache/ripbullets/logs/ripbullets.log."""
    override = os.environ.get("RIPBULLETS_LOG_FILE")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cache" / "ripbullets" / "logs" / "ripbullets.log"


def resolve_log_level(value: Optional[str]) -> str:
    """Normalize a level name, falling back to INFO for unknown values."""
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def configure_logging(log_file: Optional[Path] = None) -> Path:
    """
    Configure structlog to append JSON events to the ripbullets log file.

    The level comes from RIPBULLETS_LOG_LEVEL (DEBUG adds Logseq API
    request and response details).

    Args:
        log_file: Override for the log file location

    Returns:
        Path of the log file in use

    Example:
        RIPBULLETS_LOG_LEVEL=DEBUG ripbullets copy
        tail -f ~/.cache/ripbullets/logs/ripbullets.log | jq .
    """
    path = log_file or default_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    level = resolve_log_level(os.environ.get("RIPBULLETS_LOG_LEVEL"))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=path.open("a", encoding="utf-8")),
        cache_logger_on_first_use=True,
    )
    return path


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to ``name`` (a module's ``__name__``)."""
    return structlog.get_logger(name)
