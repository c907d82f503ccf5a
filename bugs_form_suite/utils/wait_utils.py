"""
Bounded waiting helpers.
Visibility waits for the resolution strategies.
"""

from typing import Optional
from playwright.async_api import Locator, Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError
from config.settings import Settings
from utils.logger import logger


class WaitUtils:
    """Wait utilities for locators and pages."""

    @staticmethod
    async def wait_for_visible(locator: Locator, timeout: Optional[int] = None) -> bool:
        """
        Wait for a locator to become visible.

        A locator that matches several elements counts as a failure, the same
        way Playwright's strict mode treats it.

        Args:
            locator: Playwright locator
            timeout: Timeout in ms (defaults to Settings.RESOLVE_TIMEOUT)

        Returns:
            True if visible in time, False on timeout or automation error
        """
        timeout = timeout if timeout is not None else Settings.RESOLVE_TIMEOUT

        try:
            await locator.wait_for(state='visible', timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.debug(f"Not visible within {timeout}ms: {locator}")
            return False
        except PlaywrightError as e:
            logger.debug(f"Visibility wait failed for {locator}: {e}")
            return False
