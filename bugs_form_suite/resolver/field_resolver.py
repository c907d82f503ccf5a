"""
Field Resolver - Locate a field's control on a page with broken markup.

The Bugs Form has inconsistent <label for>/id wiring, so a field is looked
up through an ordered chain of strategies:

1. accessible label (get_by_label)
2. the first input/select/textarea after the visible <label> text
3. placeholder text
4. the first control inside the page's <form>

Each of the first three must produce a control that becomes visible within
Settings.RESOLVE_TIMEOUT; any automation error or timeout moves on to the
next one. The last entry never fails, but it may match nothing, in which
case the error surfaces when the control is used.
"""

from typing import Awaitable, Callable, List, Optional, Tuple
from playwright.async_api import Page, Locator, Error as PlaywrightError
from config.settings import Settings
from models.field_descriptor import FieldDescriptor
from resolver.control import Control, ResolutionStrategy
from utils.wait_utils import WaitUtils
from utils.logger import logger


FORM_CONTROLS_SELECTOR = 'form input, form select, form textarea'
CHECKBOX_SELECTOR = 'input[type="checkbox"]'

Locate = Callable[[Page, FieldDescriptor], Awaitable[Optional[Locator]]]


def adjacent_control_selector(label_text: str) -> str:
    """Selector for the first control after a <label> containing `label_text`."""
    escaped = label_text.replace('\\', '\\\\').replace('"', '\\"')
    return (
        f'label:has-text("{escaped}") >> '
        'xpath=following::*[self::input or self::select or self::textarea][1]'
    )


class FieldResolver:
    """Resolves field descriptors to controls."""

    def __init__(self, timeout: Optional[int] = None):
        """
        Args:
            timeout: Visibility wait per strategy in ms (defaults to Settings.RESOLVE_TIMEOUT)
        """
        self.timeout = timeout

    @property
    def wait_timeout(self) -> int:
        return self.timeout if self.timeout is not None else Settings.RESOLVE_TIMEOUT

    def strategies(self) -> List[Tuple[ResolutionStrategy, Locate]]:
        """The fallible strategies, in the order they are tried."""
        return [
            (ResolutionStrategy.ACCESSIBLE_LABEL, self._by_accessible_label),
            (ResolutionStrategy.LABEL_ADJACENCY, self._by_label_adjacency),
            (ResolutionStrategy.PLACEHOLDER, self._by_placeholder),
        ]

    async def resolve(self, page: Page, descriptor: FieldDescriptor) -> Control:
        """
        Resolve a field to a control.

        Args:
            page: Playwright page object
            descriptor: Field to look for

        Returns:
            Control for the best match (possibly matching nothing)
        """
        for strategy, locate in self.strategies():
            try:
                locator = await locate(page, descriptor)
            except PlaywrightError as e:
                logger.debug(f"{strategy.value} lookup failed for {descriptor.display_name}: {e}")
                continue

            if locator is not None:
                return self._resolved(locator, strategy, descriptor)

        return self._resolved(
            page.locator(FORM_CONTROLS_SELECTOR).first,
            ResolutionStrategy.FORM_FALLBACK,
            descriptor,
        )

    async def resolve_checkbox(self, page: Page, descriptor: FieldDescriptor) -> Control:
        """
        Resolve a checkbox: the first control labelled by the descriptor,
        otherwise the first checkbox on the page.

        Visibility is not required, a disabled checkbox still has to be found.
        """
        labelled = page.get_by_label(descriptor.label_pattern).first
        try:
            if await labelled.count():
                return Control(labelled, ResolutionStrategy.ACCESSIBLE_LABEL, descriptor.display_name)
        except PlaywrightError as e:
            logger.debug(f"Label lookup failed for {descriptor.display_name}: {e}")

        logger.warning(
            f"{descriptor.display_name}: no labelled checkbox, using the first checkbox on the page"
        )
        return Control(
            page.locator(CHECKBOX_SELECTOR).first,
            ResolutionStrategy.CHECKBOX,
            descriptor.display_name,
        )

    async def _by_accessible_label(self, page: Page, descriptor: FieldDescriptor) -> Optional[Locator]:
        locator = page.get_by_label(descriptor.label_pattern)
        if await WaitUtils.wait_for_visible(locator, self.wait_timeout):
            return locator
        return None

    async def _by_label_adjacency(self, page: Page, descriptor: FieldDescriptor) -> Optional[Locator]:
        near = page.locator(adjacent_control_selector(descriptor.visual_label))
        if not await near.count():
            return None

        first = near.first
        if await WaitUtils.wait_for_visible(first, self.wait_timeout):
            return first
        return None

    async def _by_placeholder(self, page: Page, descriptor: FieldDescriptor) -> Optional[Locator]:
        locator = page.get_by_placeholder(descriptor.placeholder_pattern)
        if await WaitUtils.wait_for_visible(locator, self.wait_timeout):
            return locator
        return None

    @staticmethod
    def _resolved(locator: Locator, strategy: ResolutionStrategy, descriptor: FieldDescriptor) -> Control:
        if strategy is ResolutionStrategy.ACCESSIBLE_LABEL:
            logger.debug(f"{descriptor.display_name} resolved by accessible label")
        else:
            logger.warning(
                f"{descriptor.display_name} has no usable accessible label, "
                f"resolved by {strategy.value}"
            )
        return Control(locator, strategy, descriptor.display_name)
