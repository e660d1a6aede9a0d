"""
Structured logging system for aoc2022.

Provides centralized logging with console and optional file output,
plus metrics tracking for puzzle input loading.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for puzzle input requests.
    """

    def __init__(
        self,
        name: str = "aoc2022",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (no file output when None)
            enable_console: Output logs to the console (stderr)
        """
        self.logger = logging.getLogger(name)

        self.metrics = {
            "api_calls": 0,
            "inputs_requested": 0,
            "inputs_loaded": 0,
            "inputs_failed": 0,
            "errors_by_type": {},
            "inputs_by_source": {},
        }

        self.configure(level=level, log_dir=log_dir, enable_console=enable_console)

    def configure(
        self,
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_console: bool = True,
    ):
        """
        Replace handlers and level in place.

        Loggers captured at import time share the underlying logging.Logger,
        so they pick up the new configuration too.
        """
        self.logger.setLevel(getattr(logging, level.upper()))
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"aoc2022_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)
            # File always gets everything
            self.logger.setLevel(logging.DEBUG)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if not self.logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_api_call(self):
        """Increment API call counter."""
        self.metrics["api_calls"] += 1

    def record_input_request(self, source: str):
        """Record an attempt to load puzzle input from a source (file, cache, http)."""
        self.metrics["inputs_requested"] += 1

    def record_input_loaded(self, source: str):
        """Record a successful load."""
        self.metrics["inputs_loaded"] += 1
        by_source = self.metrics["inputs_by_source"]
        by_source[source] = by_source.get(source, 0) + 1

    def record_input_failure(self, source: str, error_type: str):
        """Record a failed load."""
        self.metrics["inputs_failed"] += 1

        if error_type not in self.metrics["errors_by_type"]:
            self.metrics["errors_by_type"][error_type] = 0
        self.metrics["errors_by_type"][error_type] += 1

    def get_metrics(self) -> dict:
        """Return a copy of current metrics."""
        metrics = self.metrics.copy()
        metrics["inputs_by_source"] = dict(self.metrics["inputs_by_source"])
        metrics["errors_by_type"] = dict(self.metrics["errors_by_type"])
        return metrics

    def log_metrics_summary(self):
        """Log a summary of current metrics at DEBUG level."""
        metrics = self.get_metrics()

        self.debug("=== Input Metrics ===")
        self.debug(f"API Calls: {metrics['api_calls']}")
        self.debug(f"Inputs: {metrics['inputs_loaded']}/{metrics['inputs_requested']} loaded")

        for source, count in metrics["inputs_by_source"].items():
            self.debug(f"  {source}: {count}")

        for error_type, count in metrics["errors_by_type"].items():
            self.debug(f"  {error_type}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "aoc2022",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
