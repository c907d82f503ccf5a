"""
Page Loader - Navigate, reload and submit across the scenario's pages.
Pages are processed one after another; a failure stops the remaining ones.
"""

from typing import Optional, Sequence
from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError
from config.settings import Settings
from models.field_descriptor import REGISTER_BUTTON_NAME
from utils.logger import logger


class PageLoader:
    """Handles page navigation and the Register click."""

    @staticmethod
    async def load(
        page: Page,
        url: str,
        timeout: Optional[int] = None
    ) -> Page:
        """
        Load URL once the DOM is ready.

        Args:
            page: Playwright page object
            url: URL to load
            timeout: Optional timeout override

        Returns:
            Loaded page
        """
        if not url.startswith(('http://', 'https://', 'file://')):
            raise ValueError(f"Invalid URL: {url}. Must start with http://, https:// or file://")

        timeout = timeout or Settings.PAGE_LOAD_TIMEOUT

        try:
            logger.debug(f"Navigating to {url}")
            await page.goto(url, wait_until='domcontentloaded', timeout=timeout)
        except PlaywrightTimeoutError as e:
            logger.error(f"Page load timeout: {url}")
            raise TimeoutError(f"Failed to load {url} within {timeout}ms") from e

        return page

    @staticmethod
    async def reload(page: Page) -> Page:
        """Reload current page."""
        logger.debug(f"Reloading {page.url}")
        await page.reload(wait_until='domcontentloaded')
        return page

    @staticmethod
    async def goto_all(pages: Sequence[Page], url: Optional[str] = None):
        """
        Open the Bugs Form on every page.

        Raises:
            ConfigurationError: If no URL is given and none is configured,
                before any page is touched
        """
        url = url or Settings.require_base_url()

        for page in pages:
            await PageLoader.load(page, url)

        logger.success(f"Opened {url} on {len(pages)} page(s)")

    @staticmethod
    async def reload_all(pages: Sequence[Page]):
        for page in pages:
            await PageLoader.reload(page)

    @staticmethod
    async def click_register_all(pages: Sequence[Page]):
        """Click the Register button on every page."""
        for page in pages:
            await page.get_by_role('button', name=REGISTER_BUTTON_NAME).click(
                timeout=Settings.ACTION_TIMEOUT
            )
            logger.debug(f"Register clicked on {page.url}")
