"""Shared fixtures for the unit tests."""

import pytest

from config.settings import Settings
from models.report import DefectReport
from resolver.field_resolver import FieldResolver


def pytest_configure(config):
    Settings.apply_log_level()


@pytest.fixture
def report():
    return DefectReport()


@pytest.fixture
def resolver():
    return FieldResolver(timeout=50)
