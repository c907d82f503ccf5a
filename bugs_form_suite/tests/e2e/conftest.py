"""
Fixtures for the BDD suite against the live Bugs Form.

Steps are plain pytest-bdd functions; they drive the async flows on one event
loop owned by the session, so the pages stay bound to a single loop.
"""

import asyncio

import pytest

from browser.browser_manager import BrowserManager
from config.settings import Settings
from flows.form_filler import FormFiller
from flows.validity import ValidityChecker
from models.report import DefectReport
from resolver.field_resolver import FieldResolver
from utils.logger import logger

DEFECT_REPORT = DefectReport()


@pytest.fixture(scope='session')
def run():
    """Run a coroutine to completion on the session's event loop."""
    loop = asyncio.new_event_loop()
    yield loop.run_until_complete
    loop.close()


@pytest.fixture(scope='session')
def pages(run):
    """One page per configured browser profile, shared by every scenario."""
    manager = BrowserManager()
    run(manager.launch())
    yield manager.pages
    run(manager.close())


@pytest.fixture(scope='session')
def defect_report():
    return DEFECT_REPORT


@pytest.fixture(scope='session')
def resolver():
    return FieldResolver()


@pytest.fixture
def filler(resolver, defect_report):
    return FormFiller(resolver, defect_report)


@pytest.fixture
def checker(resolver, defect_report):
    return ValidityChecker(resolver, defect_report)


def pytest_bdd_before_step(request, feature, scenario, step, step_func):
    logger.step(step.keyword, step.name)


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    if not DEFECT_REPORT.findings:
        return

    terminalreporter.section('known site defects')
    terminalreporter.write(DEFECT_REPORT.summary())

    if Settings.REPORT_PATH:
        DEFECT_REPORT.save_to_file(Settings.REPORT_PATH)
        terminalreporter.write_line(f"Defect report saved to: {Settings.REPORT_PATH}")
