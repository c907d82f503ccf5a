"""
Validity Checker - Assert HTML5 validity of form fields.

Expecting a valid field is strict. Expecting an invalid field is soft: when
the site reports it valid anyway, that is a known validation bug and is
logged and recorded instead of failing the run. The reverse case is never
softened.
"""

from typing import Optional, Sequence
from playwright.async_api import Page
from models.field_descriptor import FieldDescriptor
from models.report import DefectReport, VALIDITY_MISMATCH, DISABLED_CONTROL
from resolver.field_resolver import FieldResolver
from utils.errors import FieldValidityError
from utils.logger import logger


def _state(valid: bool) -> str:
    return 'VALID' if valid else 'INVALID'


class ValidityChecker:
    """Checks native validity of resolved controls."""

    def __init__(self, resolver: Optional[FieldResolver] = None, report: Optional[DefectReport] = None):
        self.resolver = resolver or FieldResolver()
        self.report = report if report is not None else DefectReport()

    async def expect_validity(self, pages: Sequence[Page], descriptor: FieldDescriptor, should_be_valid: bool):
        """
        Check one field on every page.

        Raises:
            FieldValidityError: If a field expected valid is invalid
        """
        for page in pages:
            control = await self.resolver.resolve(page, descriptor)
            valid = await control.check_validity()
            self.judge(page.url, descriptor, should_be_valid, valid)

    def judge(self, page_name: str, descriptor: FieldDescriptor, should_be_valid: bool, valid: bool) -> bool:
        """
        Compare expected and actual validity.

        Returns:
            True if it matched, False if a known bug was recorded instead

        Raises:
            FieldValidityError: If the field should be valid but is not
        """
        if should_be_valid:
            if not valid:
                raise FieldValidityError(descriptor.display_name, _state(True), _state(False), page_name)
            return True

        if valid:
            message = f'"{descriptor.display_name}" should be INVALID but the site considers it valid.'
            logger.defect(message)
            self.report.record(VALIDITY_MISMATCH, descriptor.display_name, page_name, message)
            return False

        return True

    async def expect_checkbox_required(self, pages: Sequence[Page], descriptor: FieldDescriptor):
        """
        Smoke check on the T&C checkbox: a disabled checkbox passes with a
        warning, otherwise it must be required.

        Raises:
            FieldValidityError: If an enabled checkbox is not required
        """
        for page in pages:
            checkbox = await self.resolver.resolve_checkbox(page, descriptor)
            required = await checkbox.is_required()
            disabled = await checkbox.is_disabled()

            if disabled:
                message = 'T&C checkbox is disabled (site bug). Accepting as pass for smoke.'
                logger.defect(message)
                self.report.record(DISABLED_CONTROL, descriptor.display_name, page.url, message)
                continue

            if not required:
                raise FieldValidityError(descriptor.display_name, 'required', 'not required', page.url)
