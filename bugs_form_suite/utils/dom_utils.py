"""
DOM inspection helpers.
Read tag name, native validity, and required-ness of a located control.
"""

from playwright.async_api import Locator, Error as PlaywrightError
from utils.logger import logger


class DOMUtils:
    """DOM inspection helper functions."""

    @staticmethod
    async def get_tag_name(locator: Locator) -> str:
        """
        Get the lowercase tag name of the element.

        Args:
            locator: Playwright locator

        Returns:
            Tag name such as 'input' or 'select'
        """
        tag = await locator.evaluate("(el) => el.tagName")
        return str(tag).lower()

    @staticmethod
    async def check_validity(locator: Locator) -> bool:
        """
        Read the element's native validity (checkValidity()).

        Elements without constraint validation count as valid, and so does
        an element that cannot be inspected.

        Args:
            locator: Playwright locator

        Returns:
            True if valid, False otherwise
        """
        try:
            return bool(await locator.evaluate("""
                (el) => typeof el.checkValidity === 'function' ? el.checkValidity() : true
            """))
        except PlaywrightError as e:
            logger.debug(f"Validity unreadable, assuming valid: {e}")
            return True

    @staticmethod
    async def is_required(locator: Locator) -> bool:
        """
        Read the element's `required` property.

        Args:
            locator: Playwright locator

        Returns:
            True if required, False otherwise or if unreadable
        """
        try:
            return bool(await locator.evaluate("(el) => !!el.required"))
        except PlaywrightError as e:
            logger.debug(f"Required flag unreadable: {e}")
            return False
