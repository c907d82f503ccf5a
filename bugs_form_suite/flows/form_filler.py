"""
Form Filler - Populate the registration form on every page.
Country adapts to <select> or <input>; the T&C checkbox is left alone when disabled.
"""

from typing import Any, Dict, Optional, Sequence
from playwright.async_api import Page, Error as PlaywrightError
from models.field_descriptor import FieldDescriptor, TEXT_FIELDS, COUNTRY, TERMS
from models.form_data import FormData
from models.report import DefectReport, DISABLED_CONTROL
from resolver.control import Control
from resolver.field_resolver import FieldResolver
from utils.logger import logger


class FormFiller:
    """Fills the Bugs Form using resolved controls."""

    def __init__(self, resolver: Optional[FieldResolver] = None, report: Optional[DefectReport] = None):
        self.resolver = resolver or FieldResolver()
        self.report = report if report is not None else DefectReport()

    async def fill_all(self, pages: Sequence[Page], overrides: Optional[Dict[str, Any]] = None) -> FormData:
        """
        Fill the form on each page in turn.

        Args:
            pages: Pages to fill, processed one after another
            overrides: Partial values merged over the defaults

        Returns:
            The merged FormData that was typed in
        """
        data = FormData.with_overrides(**(overrides or {}))
        logger.debug(f"Form data: {data.to_dict()}")

        for page in pages:
            await self.fill_page(page, data)

        return data

    async def fill_page(self, page: Page, data: FormData):
        """Fill every field on one page, then apply the T&C state."""
        for descriptor in TEXT_FIELDS:
            control = await self.resolver.resolve(page, descriptor)
            value = data.value_for(descriptor.key)

            if descriptor is COUNTRY:
                await self.fill_country(control, value)
            else:
                await control.fill(value)

        await self.set_terms(page, TERMS, data.accept_terms)
        logger.success(f"Form filled on {page.url}")

    async def fill_country(self, control: Control, country: str):
        """Select by label (then by value) on a <select>, type into anything else."""
        tag = await control.tag_name()

        if tag != 'select':
            await control.fill(country)
            return

        try:
            await control.select_by_label(country)
        except PlaywrightError as e:
            logger.debug(f"No option labelled {country!r}, selecting by value: {e}")
            await control.select_by_value(country)

    async def set_terms(self, page: Page, descriptor: FieldDescriptor, accept: bool):
        """
        Bring the T&C checkbox to the desired state.

        A disabled checkbox is never clicked; the defect is logged and recorded.
        Otherwise check/uncheck is only called when the state differs.
        """
        terms = await self.resolver.resolve_checkbox(page, descriptor)
        disabled = await terms.is_disabled()
        checked = await terms.is_checked()

        if disabled:
            message = 'T&C checkbox is disabled. Skipping check/uncheck (known site bug).'
            logger.defect(message)
            self.report.record(DISABLED_CONTROL, descriptor.display_name, page.url, message)
            return

        if accept and not checked:
            await terms.check(force=True)
        elif not accept and checked:
            await terms.uncheck(force=True)
