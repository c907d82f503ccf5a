"""Utility functions for the Bugs Form suite."""

from .logger import logger, SuiteLogger
from .errors import ConfigurationError, FieldValidityError

__all__ = ['logger', 'SuiteLogger', 'ConfigurationError', 'FieldValidityError']
