"""
Structured logging for store and command operations.
Secret-bearing fields are redacted before anything reaches a handler.
"""

import logging
from typing import Any, Dict, List

SENSITIVE_FIELDS = ['password', 'notes', 'content', 'value', 'secret']


class StructuredLogger:
    """Structured logger for store, command and system operations."""

    def __init__(self, name: str = "pocket_coffer", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level, logging.INFO))

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def set_level(self, level: str) -> None:
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status in ("failed", "error"):
            self.logger.error(message)
        else:
            self.logger.info(message)

    def log_store_operation(self, table: str, operation: str, record_id: str = None,
                            status: str = "success", details: Dict[str, Any] = None):
        """Log a store operation against one table."""
        log_details = {}
        if record_id is not None:
            log_details["id"] = record_id
        if details:
            log_details.update(details)

        self.log_operation(f"store.{table}.{operation}", status, log_details)

    def log_command(self, name: str, status: str = "success", payload: Dict[str, Any] = None,
                    error: str = None):
        """Log a host command invocation with its payload sanitized."""
        log_details = {}
        if payload:
            log_details["payload"] = sanitize_payload(payload)
        if error:
            log_details["error"] = error[:200]

        self.log_operation(f"command.{name}", status, log_details)

    # Plain messages for startup and error paths
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


def sanitize_payload(payload: Any, reveal_sensitive: bool = False, sensitive_fields: List[str] = None) -> Any:
    """Sanitize payloads for logging."""
    if sensitive_fields is None:
        sensitive_fields = SENSITIVE_FIELDS

    if isinstance(payload, dict):
        sanitized = {}
        for k, v in payload.items():
            if reveal_sensitive or k not in sensitive_fields:
                sanitized[k] = sanitize_payload(v, reveal_sensitive, sensitive_fields)
            else:
                sanitized[k] = "[REDACTED]"
        return sanitized
    elif isinstance(payload, str):
        # Truncate long strings
        return payload[:100] + "..." if len(payload) > 100 else payload
    elif isinstance(payload, list):
        return [sanitize_payload(item, reveal_sensitive, sensitive_fields) for item in payload]
    else:
        return payload


# Global logger instance
logger = StructuredLogger()
