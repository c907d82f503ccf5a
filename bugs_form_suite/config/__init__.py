"""Configuration package for the Bugs Form suite."""

from .settings import Settings
from .browser_profiles import BrowserProfiles

__all__ = ['Settings', 'BrowserProfiles']
