"""
Structured logging for the suite.
Tracks scenario steps and known site defects on the console.
"""

import logging
import sys
from typing import Optional


class SuiteLogger:
    """Custom logger for the suite with step tracking."""

    def __init__(self, name: str = "BugsForm", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Remove existing handlers
        self.logger.handlers.clear()

        # Console handler with formatting
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

        self.current_step: Optional[str] = None

    def step(self, keyword: str, text: str):
        """Log a scenario step (Given/When/Then)."""
        self.current_step = f"{keyword} {text}"
        self.logger.info(f"[STEP] {keyword} {text}")

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def success(self, message: str):
        """Log success message."""
        self.logger.info(f"[OK] {message}")

    def defect(self, message: str):
        """Log a known site defect, tagged with the step that hit it. Never fails the run."""
        if self.current_step:
            message = f"{message} (at: {self.current_step})"
        self.logger.warning(f"[BUG] {message}")

    def set_level(self, level: str):
        """Change the log level at runtime."""
        self.logger.setLevel(getattr(logging, level.upper()))


# Global logger instance
logger = SuiteLogger()
