"""Observability – structlog configuration and a logging fault hook."""
from __future__ import annotations

import logging
from typing import Any, Callable, TextIO

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when given.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def configure_logging(
    level: int = logging.INFO,
    *,
    json: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib records through one root handler.

    Records from the stdlib loggers (``reattempt.retry.driver`` among them)
    are rendered by the same ``ProcessorFormatter`` as structlog events, with
    their ``extra=`` fields as top-level keys.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*shared_processors, structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def log_faults(logger: Any = None, *, level: str = "warning") -> Callable[[BaseException], None]:
    """Build a ``fault_hook`` that logs every retried fault as ``retry.fault``."""
    log = logger if logger is not None else get_logger("reattempt.retry")
    emit = getattr(log, level)

    def hook(fault: BaseException) -> None:
        emit("retry.fault", error=repr(fault), error_type=type(fault).__name__)

    return hook


__all__ = ["configure_logging", "get_logger", "log_faults"]
