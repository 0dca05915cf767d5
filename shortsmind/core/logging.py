"""
Structured logging configuration

One logging setup for the whole client:
- JSON records for log files (and the console when LOG_JSON=true)
- Coloured one-line records for the console otherwise
- session / concept correlation fields taken from context variables
- LogTimer for timing generation calls

Modules log through an adapter:

    logger = get_logger(__name__, component="library_store")
    logger.info("Saved concept", extra={"library_size": 3})
"""

import json
import logging
import os
import sys
import time
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

SENSITIVE_KEY_TOKENS = ("password", "secret", "token", "api_key", "apikey", "authorization")
REDACTED = "***REDACTED***"

NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "google_genai", "asyncio")

session_id_var: ContextVar[Optional[str]] = ContextVar("session_id", default=None)
concept_id_var: ContextVar[Optional[str]] = ContextVar("concept_id", default=None)

_CONTEXT_VARS: Dict[str, ContextVar] = {
    "session_id": session_id_var,
    "concept_id": concept_id_var,
}

# Attributes every LogRecord has; anything else arrived through extra={...}
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def current_context() -> Dict[str, str]:
    """Correlation fields that are set in the current context."""
    context = {}
    for key, var in _CONTEXT_VARS.items():
        value = var.get()
        if value:
            context[key] = value
    return context


def _is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(token in lowered for token in SENSITIVE_KEY_TOKENS)


def _redact(value: Any, key: str = "") -> Any:
    if key and _is_sensitive_key(key) and not isinstance(value, (dict, list, tuple)):
        return REDACTED
    if isinstance(value, dict):
        return {k: _redact(v, str(k)) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_redact(item, key) for item in value)
    return value


def _record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and key not in _CONTEXT_VARS and not key.startswith("_")
    }


class StructuredFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_data.update(current_context())

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }

        extras = _record_extras(record)
        if extras:
            log_data["extra"] = _redact(extras)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Coloured single-line console output"""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname, self.RESET)
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]

        context = current_context()
        tags = []
        if "session_id" in context:
            tags.append(f"session:{context['session_id'][:8]}")
        if "concept_id" in context:
            tags.append(f"concept:{context['concept_id'][:12]}")
        tag_text = f" [{' '.join(tags)}]" if tags else ""

        line = f"{color}{clock} {record.levelname:<8}{self.RESET} {record.name}{tag_text}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class LoggerAdapter(logging.LoggerAdapter):
    """Adds correlation fields and the adapter's static fields to every call"""

    def process(self, msg: str, kwargs: Any) -> tuple:
        extra = dict(kwargs.get("extra") or {})
        extra.update(current_context())
        for key, value in (self.extra or {}).items():
            extra.setdefault(key, value)
        kwargs["extra"] = extra
        return msg, kwargs


def _console_handler(use_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if use_json else DevelopmentFormatter())
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024))),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", "3")),
        encoding="utf-8",
    )
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    use_json: Optional[bool] = None,
) -> None:
    """
    Configure root logging, replacing any existing handlers.

    Args:
        level: Level name; defaults to LOG_LEVEL, then INFO
        log_file: Optional rotating log file (always JSON)
        use_json: JSON console output; defaults to LOG_JSON=true
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if use_json is None:
        use_json = os.getenv("LOG_JSON", "false").lower() == "true"

    handlers = [_console_handler(use_json)]
    if log_file:
        handlers.append(_file_handler(Path(log_file)))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, **extra: Any) -> LoggerAdapter:
    """Logger for a module with static fields such as component="..."."""
    return LoggerAdapter(logging.getLogger(name), extra)


def set_session_id(session_id: Optional[str]) -> None:
    session_id_var.set(session_id)


def set_concept_id(concept_id: Optional[str]) -> None:
    concept_id_var.set(concept_id)


def clear_context() -> None:
    for var in _CONTEXT_VARS.values():
        var.set(None)


class LogTimer:
    """Context manager that logs start, completion and failure of an operation"""

    def __init__(self, logger: logging.LoggerAdapter, operation: str, level: int = logging.DEBUG):
        self.logger = logger
        self.operation = operation
        self.level = level
        self._started: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self) -> "LogTimer":
        self._started = time.perf_counter()
        self.logger.log(self.level, f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb) -> None:
        self.elapsed = time.perf_counter() - self._started
        if exc_type:
            self.logger.warning(
                f"Failed: {self.operation}",
                extra={"duration_seconds": round(self.elapsed, 3), "error": str(exc_val)},
            )
        else:
            self.logger.log(
                self.level,
                f"Completed: {self.operation}",
                extra={"duration_seconds": round(self.elapsed, 3)},
            )
