"""
Browser Manager - Launch Playwright and open the pages a scenario runs on.
One page per configured profile, each in its own browser context.
"""

from typing import Dict, List, Optional
from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright
from config.settings import Settings
from config.browser_profiles import BrowserProfiles
from utils.logger import logger


class BrowserManager:
    """Manages the Playwright browser lifecycle and the fixed set of pages."""

    def __init__(self, profile_names: Optional[List[str]] = None, headless: Optional[bool] = None):
        """
        Initialize browser manager.

        Args:
            profile_names: Browser profiles to open a page for (defaults to Settings.BROWSER_PROFILES)
            headless: Override headless setting
        """
        self.profile_names = list(profile_names or Settings.BROWSER_PROFILES)
        self.headless = headless if headless is not None else Settings.HEADLESS
        self.profiles = [BrowserProfiles.get_profile(name) for name in self.profile_names]

        self.playwright: Optional[Playwright] = None
        self.browsers: Dict[str, Browser] = {}
        self.contexts: List[BrowserContext] = []
        self.pages: List[Page] = []

    async def __aenter__(self):
        """Async context manager entry."""
        await self.launch()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def launch(self) -> List[Page]:
        """
        Launch the browsers and open one page per profile.

        Returns:
            The opened pages, in profile order
        """
        logger.info(f"Launching browsers for profiles: {', '.join(self.profile_names)}")

        self.playwright = await async_playwright().start()

        # __aexit__ is skipped when __aenter__ raises
        try:
            for profile in self.profiles:
                browser = await self._get_browser(profile['engine'], profile['args'])
                context = await browser.new_context(viewport=profile['viewport'])
                context.set_default_timeout(Settings.ACTION_TIMEOUT)
                self.contexts.append(context)
                self.pages.append(await context.new_page())
        except BaseException:
            logger.error("Browser launch failed, closing what was opened")
            await self.close()
            raise

        logger.success(f"{len(self.pages)} page(s) ready")
        return self.pages

    async def _get_browser(self, engine: str, args: List[str]) -> Browser:
        """Launch each engine once and share it between profiles."""
        if engine not in self.browsers:
            browser_type = getattr(self.playwright, engine)
            self.browsers[engine] = await browser_type.launch(headless=self.headless, args=args)
        return self.browsers[engine]

    async def new_page(self, html: Optional[str] = None) -> Page:
        """
        Open an extra page in the first context, optionally with inline HTML.

        Returns:
            Page instance
        """
        if not self.contexts:
            await self.launch()

        page = await self.contexts[0].new_page()
        if html is not None:
            await page.set_content(html)
        return page

    async def close(self):
        """Close pages, contexts and browsers."""
        for context in self.contexts:
            await context.close()

        for browser in self.browsers.values():
            await browser.close()

        if self.playwright:
            await self.playwright.stop()

        self.contexts.clear()
        self.browsers.clear()
        self.pages.clear()
        self.playwright = None
        logger.success("Browsers closed")
