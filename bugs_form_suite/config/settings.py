"""
Configuration settings for the Bugs Form suite.
Controls the target URL, browser behavior, and resolution timeouts.
"""

import os
from typing import Dict, Any, List, Optional

from dotenv import load_dotenv

from utils.errors import ConfigurationError
from utils.logger import logger

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


class Settings:
    """Central configuration for the suite."""

    # Target site
    BASE_URL: Optional[str] = os.getenv('BASEURL') or os.getenv('BASE_URL')

    # Browser settings
    HEADLESS: bool = _env_flag('HEADLESS', True)
    BROWSER_PROFILES: List[str] = _env_list('BROWSER_PROFILES', ['desktop_chromium'])

    # Timeouts (in milliseconds)
    RESOLVE_TIMEOUT: int = 800  # per resolution strategy
    PAGE_LOAD_TIMEOUT: int = 30000  # 30 seconds
    ACTION_TIMEOUT: int = 5000  # fill/select/click

    # Defect report output (JSON), written when set
    REPORT_PATH: Optional[str] = os.getenv('DEFECT_REPORT')

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            key: value for key, value in cls.__dict__.items()
            if not key.startswith('_') and not callable(value)
            and not isinstance(value, classmethod)
        }

    @classmethod
    def update(cls, **kwargs):
        """Update settings dynamically."""
        for key, value in kwargs.items():
            if hasattr(cls, key.upper()):
                setattr(cls, key.upper(), value)

    @classmethod
    def require_base_url(cls) -> str:
        """
        Get the target base URL.

        Returns:
            The configured base URL

        Raises:
            ConfigurationError: If no base URL is configured
        """
        if not cls.BASE_URL:
            raise ConfigurationError(
                "Missing BASEURL: set it in the environment or in a .env file"
            )
        return cls.BASE_URL

    @classmethod
    def apply_log_level(cls, level: Optional[str] = None):
        """Apply LOG_LEVEL (or an explicit level) to the suite logger."""
        if level:
            cls.LOG_LEVEL = level
        logger.set_level(cls.LOG_LEVEL)
