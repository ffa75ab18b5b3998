"""Observability – structured logging helpers."""
from reattempt.observability.logging import configure_logging, get_logger, log_faults

__all__ = ["configure_logging", "get_logger", "log_faults"]
