"""
Control - Capability handle over one located form control.
Exposes only the operations the flows use, decoupled from the concrete locator.
"""

from enum import Enum
from typing import Optional
from playwright.async_api import Locator, Error as PlaywrightError
from config.settings import Settings
from utils.dom_utils import DOMUtils
from utils.logger import logger


class ResolutionStrategy(Enum):
    """How a control was located, in the order the resolver tries them."""

    ACCESSIBLE_LABEL = 'accessible_label'
    LABEL_ADJACENCY = 'label_adjacency'
    PLACEHOLDER = 'placeholder'
    FORM_FALLBACK = 'form_fallback'
    CHECKBOX = 'checkbox'


class Control:
    """A resolved interactive element (input, select, textarea, checkbox)."""

    def __init__(self, locator: Locator, strategy: ResolutionStrategy, field: str = ""):
        self.locator = locator
        self.strategy = strategy
        self.field = field

    async def fill(self, value: str, timeout: Optional[int] = None):
        """Replace the control's value."""
        await self.locator.fill(value, timeout=timeout or Settings.ACTION_TIMEOUT)

    async def select_by_label(self, label: str, timeout: Optional[int] = None):
        """Select the <option> whose visible text is `label`."""
        await self.locator.select_option(label=label, timeout=timeout or Settings.ACTION_TIMEOUT)

    async def select_by_value(self, value: str, timeout: Optional[int] = None):
        """Select the <option> whose value (or label) is `value`."""
        await self.locator.select_option(value, timeout=timeout or Settings.ACTION_TIMEOUT)

    async def check(self, force: bool = True):
        await self.locator.check(force=force, timeout=Settings.ACTION_TIMEOUT)

    async def uncheck(self, force: bool = True):
        await self.locator.uncheck(force=force, timeout=Settings.ACTION_TIMEOUT)

    async def click(self):
        await self.locator.click(timeout=Settings.ACTION_TIMEOUT)

    async def tag_name(self) -> str:
        """Lowercase tag name ('input', 'select', ...)."""
        return await DOMUtils.get_tag_name(self.locator)

    async def is_disabled(self) -> bool:
        """Disabled state, False if it cannot be read."""
        try:
            return await self.locator.is_disabled(timeout=Settings.RESOLVE_TIMEOUT)
        except PlaywrightError as e:
            logger.debug(f"Disabled state unreadable for {self.field}: {e}")
            return False

    async def is_checked(self) -> bool:
        """Checked state, False if it cannot be read."""
        try:
            return await self.locator.is_checked(timeout=Settings.RESOLVE_TIMEOUT)
        except PlaywrightError as e:
            logger.debug(f"Checked state unreadable for {self.field}: {e}")
            return False

    async def is_required(self) -> bool:
        return await DOMUtils.is_required(self.locator)

    async def check_validity(self) -> bool:
        return await DOMUtils.check_validity(self.locator)

    def __repr__(self) -> str:
        """String representation."""
        return f"Control({self.field or '?'} via {self.strategy.value})"
