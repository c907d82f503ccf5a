"""
Bugs Form Probe - One-shot smoke run against the registration form.
Fills the form, clicks Register, and reports every field the site wrongly accepts.
"""

import asyncio
import argparse
import sys
from typing import Any, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError

from browser.browser_manager import BrowserManager
from browser.page_loader import PageLoader
from config.settings import Settings
from flows.form_filler import FormFiller
from flows.validity import ValidityChecker
from models.field_descriptor import TEXT_FIELDS, TERMS, get_field
from models.report import DefectReport
from resolver.field_resolver import FieldResolver
from utils.errors import ConfigurationError, FieldValidityError
from utils.logger import logger


def parse_overrides(assignments: List[str]) -> Dict[str, Any]:
    """
    Parse `key=value` pairs into form overrides.

    `accept_terms` takes true/false; every other key must name a text field.

    Raises:
        ValueError: On a malformed pair or an unknown key
    """
    overrides: Dict[str, Any] = {}

    for assignment in assignments:
        key, sep, value = assignment.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected key=value, got: {assignment!r}")

        if key == 'accept_terms':
            overrides[key] = value.strip().lower() in ('1', 'true', 'yes', 'on')
            continue

        descriptor = get_field(key)
        if descriptor is TERMS:
            raise ValueError("Use accept_terms=true|false for the T&C checkbox")
        overrides[key] = value

    return overrides


async def run_probe(
    url: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    headless: Optional[bool] = None,
    output_file: Optional[str] = None,
) -> DefectReport:
    """
    Run the probe on every configured browser profile.

    Overridden fields are expected invalid after submitting (soft check, a
    field the site still accepts ends up in the report); fields left at their
    default value are expected valid (strict check).

    Returns:
        The DefectReport of the run

    Raises:
        FieldValidityError: If a default-valued field is reported invalid
    """
    url = url or Settings.require_base_url()
    overrides = overrides or {}
    report = DefectReport()
    resolver = FieldResolver()
    filler = FormFiller(resolver, report)
    checker = ValidityChecker(resolver, report)

    async with BrowserManager(headless=headless) as manager:
        pages = manager.pages

        await PageLoader.goto_all(pages, url)
        data = await filler.fill_all(pages, overrides)
        await PageLoader.click_register_all(pages)

        for descriptor in TEXT_FIELDS:
            should_be_valid = descriptor.key not in overrides
            for page in pages:
                control = await resolver.resolve(page, descriptor)
                valid = await control.check_validity()
                logger.info(
                    f"{descriptor.display_name} = {data.value_for(descriptor.key)!r}: "
                    f"{'valid' if valid else 'invalid'} ({control.strategy.value})"
                )
                checker.judge(page.url, descriptor, should_be_valid, valid)

        await checker.expect_checkbox_required(pages, TERMS)

    print("\n" + report.summary())

    if output_file:
        report.save_to_file(output_file)
        logger.success(f"Report saved to: {output_file}")

    return report


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Bugs Form Probe - fill, submit and report validation defects"
    )

    parser.add_argument(
        '--url',
        type=str,
        help='Form URL (defaults to BASEURL from the environment or .env)'
    )

    parser.add_argument(
        '--set',
        dest='assignments',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help="Override a form value, e.g. --set last_name= --set accept_terms=true"
    )

    parser.add_argument(
        '--report',
        type=str,
        default=Settings.REPORT_PATH,
        help='Output JSON file for the defect report (optional)'
    )

    parser.add_argument(
        '--no-headless',
        action='store_true',
        help='Run browser in visible mode'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    Settings.apply_log_level("DEBUG" if args.debug else None)

    try:
        overrides = parse_overrides(args.assignments)
    except (ValueError, KeyError) as e:
        parser.error(str(e))

    try:
        asyncio.run(run_probe(
            url=args.url,
            overrides=overrides,
            headless=False if args.no_headless else None,
            output_file=args.report,
        ))
    except KeyboardInterrupt:
        logger.warning("\nProbe interrupted by user")
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except FieldValidityError as e:
        logger.error(f"Validity check failed: {e}")
        sys.exit(1)
    except (PlaywrightError, TimeoutError) as e:
        logger.error(f"\nFatal error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
