"""
Spy Cat Agency console.
Structured logging - shared by the API client, state controller and TUI.
"""

import logging
from typing import Any, Dict

from spycats.core.config import debug_enabled

class StructuredLogger:
    """Structured logger for API calls and dashboard operations."""

    def __init__(self, name: str = "spycats"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status in ("failed", "error"):
            self.logger.warning(message)
        else:
            self.logger.info(message)

    def log_api_call(self, method: str, path: str, status_code: int = None, status: str = "success"):
        """Log a REST call made against the spy cat backend."""
        details = {"path": path}
        if status_code is not None:
            details["status_code"] = status_code

        self.log_operation(f"api.{method.upper()}", status, details)

    def log_cat_change(self, action: str, cat_id: int, details: Dict[str, Any] = None):
        """Log a local change to the spy cat collection."""
        log_details = {"cat_id": cat_id}
        if details:
            log_details.update(details)

        self.log_operation(f"cats.{action}", "success", log_details)

    # Standard logging methods for compatibility
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

# Global logger instance
logger = StructuredLogger()
