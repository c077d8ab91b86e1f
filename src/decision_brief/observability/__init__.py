"""Public observability primitives: structured logging."""

from decision_brief.observability.logging import (
    LoggingConfig,
    LogRedactor,
    StructuredLoggingHandle,
    default_log_redactor,
    get_active_logger,
    setup_logging,
    setup_structured_logging,
    shutdown_logging,
)

__all__ = [
    "LogRedactor",
    "LoggingConfig",
    "StructuredLoggingHandle",
    "default_log_redactor",
    "get_active_logger",
    "setup_logging",
    "setup_structured_logging",
    "shutdown_logging",
]
