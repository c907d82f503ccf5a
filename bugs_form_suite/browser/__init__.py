"""Browser package for the Bugs Form suite."""

from .browser_manager import BrowserManager
from .page_loader import PageLoader

__all__ = ['BrowserManager', 'PageLoader']
