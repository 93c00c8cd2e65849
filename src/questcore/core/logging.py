"""Structured logging for questcore.

Engine modules log through structlog so that combat and progression events
carry key/value context (combatant, roll, damage, level) rather than
preformatted strings. A ``Battle`` binds its ``battle_id`` into the
contextvars only while one of its actions runs, so events from that action
are tagged with it and nothing leaks into code running between actions or
into another battle.

Example:
    >>> from questcore.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Attack resolved", attacker="Aria", hit=True, damage=7)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


APP_NAME = "questcore"
STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# =============================================================================
# Processors
# =============================================================================


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the engine name."""
    event_dict["app"] = APP_NAME
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _render_chain(json_format: bool) -> list[Processor]:
    if json_format:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


# =============================================================================
# Configuration
# =============================================================================


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def _configure_stdlib(log_level: int, log_file: str | None) -> None:
    logging.basicConfig(format=STDLIB_FORMAT, level=log_level, stream=sys.stdout, force=True)
    if log_file is None:
        return
    handler = logging.FileHandler(log_file)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(STDLIB_FORMAT))
    logging.getLogger().addHandler(handler)


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        json_format: Render events as JSON lines instead of the colored
            console format.
        log_file: Optional path that also receives stdlib log records.
    """
    log_level = _resolve_level(level)

    structlog.configure(
        processors=[*_shared_processors(), *_render_chain(json_format)],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configure_stdlib(log_level, log_file)


def configure_from_settings() -> None:
    """Configure logging from the cached engine settings.

    Debug mode forces DEBUG regardless of ``log_level``.
    """
    from questcore.core.config import get_settings

    settings = get_settings()
    configure_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        json_format=settings.json_logs,
        log_file=settings.log_file,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, usually with ``__name__``."""
    return structlog.get_logger(name)


# =============================================================================
# Context
# =============================================================================


def bind_context(**kwargs: Any) -> None:
    """Attach key/value pairs to every later event in this context.

    Example:
        >>> bind_context(battle_id="3f2c", monster="goblin")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


@contextmanager
def bound_context(**kwargs: Any) -> Iterator[None]:
    """Bind key/value pairs for the duration of a ``with`` block.

    Values bound before the block are restored when it exits.

    Example:
        >>> with bound_context(battle_id="3f2c"):
        ...     logger.info("Attack resolved")
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "APP_NAME",
    "add_app_context",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "bound_context",
    "unbind_context",
    "clear_context",
]
