"""Observability framework for the impact scorer.

This module provides structured logging configuration and the
debug_wrapper tracing decorator used around the analysis services.
"""

import functools
import json
import logging
import re
import sys
import time
import traceback
from collections.abc import Callable
from typing import Any, TypeVar, cast

import structlog
from pydantic import BaseModel
from structlog.contextvars import bind_contextvars, merge_contextvars, unbind_contextvars


def _renderer(json_logs: bool) -> Any:
    if json_logs or not sys.stderr.isatty():
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog over the stdlib logging backend.

    Safe to call more than once; the last call wins.
    """
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level.upper())
    logging.getLogger().setLevel(level.upper())

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(json_logs),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Get logger instance
logger = structlog.get_logger(__name__)

# Type variable for generic decorator
F = TypeVar("F", bound=Callable[..., Any])

# Sensitive data redaction pattern
_SENSITIVE_KEY_RE = re.compile(r"(token|key|secret|password|authorization)", re.IGNORECASE)


def set_correlation_id(correlation_id: str) -> None:
    """Bind a correlation id to every log line emitted in this context."""
    bind_contextvars(correlation_id=correlation_id)


def clear_correlation_id() -> None:
    unbind_contextvars("correlation_id")


def _mask_scalar(value: Any) -> Any:
    if value is None:
        return None
    s = str(value)
    if len(s) <= 8:
        return "***"
    return f"{s[:4]}…{s[-3:]}"


def _serialize_value(value: Any, max_length: int = 1000) -> Any:
    """Safely serialize a value for logging.

    Args:
        value: Value to serialize
        max_length: Maximum string length for truncation

    Returns:
        Serializable representation of the value
    """
    try:
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)

        json_str = json.dumps(value, default=str)
        if len(json_str) > max_length:
            return json_str[:max_length] + "..."
        return json.loads(json_str)  # Parse back to keep consistent types

    except (TypeError, ValueError):
        str_repr = str(value)
        if len(str_repr) > max_length:
            return str_repr[:max_length] + "..."
        return str_repr


def _safe_serialize_kv(key: str, value: Any, max_length: int) -> Any:
    if _SENSITIVE_KEY_RE.search(str(key)):
        return _mask_scalar(value)
    return _serialize_value(value, max_length)


def debug_wrapper(
    *,
    capture_result: bool = True,
    capture_args: bool = True,
    max_arg_length: int = 1000,
    log_level: str = "INFO",
) -> Callable[[F], F]:
    """Decorator for function tracing.

    Logs entry (optionally with arguments), success with duration and
    optional result, and failure with error type and traceback. The
    exception is always re-raised.

    Example:
        >>> @debug_wrapper(capture_args=False)
        ... def reconstruct(match_id: str) -> dict:
        ...     return {"id": match_id}
    """

    def decorator(func: F) -> F:
        function_name = f"{func.__module__}.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            execution_id = f"{function_name}_{int(time.time() * 1000000)}"
            bind_contextvars(execution_id=execution_id)

            call_args: dict[str, Any] = {}
            if capture_args:
                call_args = {
                    "args": [_serialize_value(arg, max_arg_length) for arg in args],
                    "kwargs": {
                        k: _safe_serialize_kv(k, v, max_arg_length) for k, v in kwargs.items()
                    },
                }

            logger.log(
                getattr(logging, log_level.upper()),
                f"Executing function: {function_name}",
                execution_id=execution_id,
                **call_args,
            )

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error in function: {function_name}",
                    execution_id=execution_id,
                    duration_ms=(time.perf_counter() - start_time) * 1000,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    traceback=traceback.format_exc(),
                    **call_args,
                )
                raise
            finally:
                unbind_contextvars("execution_id")

            logger.log(
                getattr(logging, log_level.upper()),
                f"Successfully executed: {function_name}",
                execution_id=execution_id,
                duration_ms=(time.perf_counter() - start_time) * 1000,
                result=_serialize_value(result, max_arg_length) if capture_result else None,
            )
            return result

        return cast(F, wrapper)

    return decorator


def trace_scoring(func: F) -> F:
    """Decorator for scoring services: timings only, payloads are too large to log."""
    return debug_wrapper(
        capture_result=False,
        capture_args=False,
        log_level="DEBUG",
    )(func)
