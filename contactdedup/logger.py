"""
Structured logging for contactdedup.

Provides centralized logging to stderr and optionally to a daily log file,
plus run metrics for a report (pairs scored, rows emitted, label counts).
Stdout is left alone since it carries the report itself.
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
    Tracks metrics for a deduplication run.
    """

    def __init__(
        self,
        name: str = "contactdedup",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = False,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to stderr
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.metrics = {
            "contacts_loaded": 0,
            "pairs_scored": 0,
            "email_short_circuits": 0,
            "rows_emitted": 0,
            "rows_suppressed": 0,
            "labels": {},
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"contactdedup_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

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
        if context:
            message = f"{message} | Context: {json.dumps(context)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_contacts_loaded(self, count: int):
        self.metrics["contacts_loaded"] += count

    def record_pair_scored(self, email_match: bool = False):
        """Record one scored pair; email_match marks the email short-circuit."""
        self.metrics["pairs_scored"] += 1
        if email_match:
            self.metrics["email_short_circuits"] += 1

    def record_row_emitted(self, label: str):
        """Record a report row and the label its score falls in."""
        self.metrics["rows_emitted"] += 1
        labels = self.metrics["labels"]
        labels[label] = labels.get(label, 0) + 1

    def record_row_suppressed(self):
        self.metrics["rows_suppressed"] += 1

    def get_metrics(self) -> dict:
        """Return a copy of the current metrics."""
        metrics_copy = self.metrics.copy()
        metrics_copy["labels"] = dict(self.metrics["labels"])
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Deduplication Run Metrics ===")
        self.info(f"Contacts: {metrics['contacts_loaded']}")
        self.info(f"Pairs scored: {metrics['pairs_scored']} ({metrics['email_short_circuits']} by email)")
        self.info(f"Rows: {metrics['rows_emitted']} emitted, {metrics['rows_suppressed']} below threshold")

        if metrics["labels"]:
            self.info("Labels:")
            for label, count in metrics["labels"].items():
                self.info(f"  {label}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "contactdedup",
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
