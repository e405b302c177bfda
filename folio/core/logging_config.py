import json
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from folio.core.config import Settings

# Structured extras copied into the JSON record when present.
_EXTRA_FIELDS = (
    "request_id",
    "service",
    "endpoint",
    "method",
    "status_code",
    "response_time_ms",
    "user_id",
    "post_id",
    "error_code",
)


class StructuredFormatter(logging.Formatter):
    """
    Formats log records as one JSON object per line so they can be shipped
    to a log aggregator without further parsing.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "process": record.process,
            "thread": record.thread,
        }

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    level = settings.LOG_LEVEL.upper()
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
            "level": level,
            "stream": "ext://sys.stdout",
        },
    }
    app_handlers = ["console"]
    api_handlers = ["console"]

    if settings.LOG_TO_FILES:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        for name, filename, file_level, backups in (
            ("file_all", "app.log", level, 10),
            ("file_errors", "errors.log", "ERROR", 10),
            ("file_api", "api.log", level, 10),
        ):
            handlers[name] = {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "structured",
                "filename": str(log_dir / filename),
                "maxBytes": 10485760,  # 10MB
                "backupCount": backups,
                "level": file_level,
            }
        app_handlers += ["file_all", "file_errors"]
        api_handlers += ["file_api", "file_errors"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {"()": StructuredFormatter},
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "folio": {"level": level, "handlers": app_handlers, "propagate": False},
            "folio.api": {"level": level, "handlers": api_handlers, "propagate": False},
            "uvicorn": {"level": "INFO", "handlers": api_handlers, "propagate": False},
            "uvicorn.access": {"level": "INFO", "handlers": api_handlers[1:] or ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def setup_logging(settings: Settings) -> None:
    """
    Configure console and rotating JSON file logging for the whole process.
    """
    logging.config.dictConfig(build_logging_config(settings))

    logger = logging.getLogger("folio")
    logger.info("Logging system initialized")
    if settings.LOG_TO_FILES:
        logger.info(f"Log files will be stored in: {Path(settings.LOG_DIR).absolute()}")


def log_api_request(logger: logging.Logger, method: str, endpoint: str,
                    status_code: int = None, response_time_ms: int = None,
                    user_id: str = None, **kwargs):
    """
    Record one API request with structured context.

    Args:
        logger: Logger to use
        method: HTTP method
        endpoint: Path that was requested
        status_code: Response status code
        response_time_ms: Time spent handling the request
        user_id: Authenticated user id, when known
        **kwargs: Extra structured fields
    """
    extra = {
        "method": method,
        "endpoint": endpoint,
        "service": "api",
    }

    if status_code:
        extra["status_code"] = status_code
    if response_time_ms is not None:
        extra["response_time_ms"] = response_time_ms
    if user_id:
        extra["user_id"] = user_id

    extra.update(kwargs)

    if status_code and status_code >= 500:
        logger.error(f"API request failed: {method} {endpoint}", extra=extra)
    elif status_code and status_code >= 400:
        logger.warning(f"API request rejected: {method} {endpoint}", extra=extra)
    else:
        logger.info(f"API request: {method} {endpoint}", extra=extra)
