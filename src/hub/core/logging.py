"""Logging configuration using structlog."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from structlog.contextvars import bind_contextvars, bound_contextvars, clear_contextvars


def setup_logging(debug: bool = False) -> None:
    """Configure structlog for structured logging.

    Args:
        debug: If True, use colored console output. If False, use JSON for production.
    """
    # Set up standard library logging
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # Configure structlog processors
    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Human-readable colored output for development
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        # JSON output for production
        processors = shared_processors + [structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Set library log levels to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def bind_session_context(session_id: str | None, user_id: str | None = None) -> None:
    """Bind dashboard session context to all subsequent log calls.

    Args:
        session_id: Identifier of the dashboard session issuing the calls.
        user_id: Optional id of the signed-in staff member.
    """
    if session_id:
        bind_contextvars(session_id=session_id)
    if user_id:
        bind_contextvars(user_id=user_id)


@contextmanager
def operation_context(category: str, operation: str, **extra: str) -> Iterator[None]:
    """Bind repository category and operation for the duration of one call.

    Values bound before entering are restored on exit, so nested operations
    (create re-fetching by id) log under the innermost operation only while
    it runs.
    """
    with bound_contextvars(category=category, operation=operation, **extra):
        yield


def clear_session_context() -> None:
    """Clear all session-scoped context."""
    clear_contextvars()
