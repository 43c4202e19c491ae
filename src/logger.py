"""
Logging Configuration Module.

Builds the application logger used across the linker. Structured messages
(dicts) are serialized to JSON, plain strings are emitted as-is. When the
process runs inside a GitHub Actions job, error records are prefixed with the
``::error::`` workflow command so they show up as annotations on the run.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class JSONFormatter(logging.Formatter):
    """Formatter rendering dict messages as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            log_data = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": record.levelname,
                **record.msg,
            }
            if record.exc_info:
                log_data["exception"] = self.formatException(record.exc_info)
            return json.dumps(log_data, default=str)
        return super().format(record)


class WorkflowCommandFormatter(JSONFormatter):
    """Prefix error records with the GitHub Actions ``::error::`` command."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            # workflow commands are line based
            return "::error::" + message.replace("\n", "%0A")
        return message


class LogManager:
    """
    Configure the application logger.

    Attributes:
        logger (logging.Logger): Configured logger instance
    """

    def __init__(
        self,
        app_name: str,
        log_dir: Optional[str] = None,
        development: bool = False,
        level: int = logging.INFO,
    ):
        """
        Initialize the logger.

        Args:
            app_name (str): Logger name
            log_dir (Optional[str]): Directory for an additional log file, if any
            development (bool): Emit debug records regardless of ``level``
            level (int): Logging level
        """
        self.logger = logging.getLogger(app_name)
        self.logger.setLevel(logging.DEBUG if development else level)
        self.logger.propagate = False

        if self.logger.handlers:
            return

        in_workflow = os.environ.get("GITHUB_ACTIONS", "").lower() == "true"
        formatter = WorkflowCommandFormatter() if in_workflow else JSONFormatter()

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        self.logger.addHandler(stream_handler)

        if log_dir:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path / f"{app_name}.log")
            file_handler.setFormatter(JSONFormatter())
            self.logger.addHandler(file_handler)
