"""
Tests for the probe CLI argument handling.
"""

import logging

import pytest

from config.settings import Settings
from probe import main, parse_overrides
from utils.logger import logger


def test_parse_overrides_accepts_text_fields_and_terms():
    assert parse_overrides(['last_name=', 'phone=12', 'accept_terms=true']) == {
        'last_name': '',
        'phone': '12',
        'accept_terms': True,
    }


def test_parse_overrides_keeps_equals_in_value():
    assert parse_overrides(['password=a=b']) == {'password': 'a=b'}


@pytest.mark.parametrize('assignment', ['phone', '=1'])
def test_parse_overrides_rejects_malformed_pairs(assignment):
    with pytest.raises(ValueError, match='Expected key=value'):
        parse_overrides([assignment])


def test_parse_overrides_rejects_unknown_field():
    with pytest.raises(KeyError):
        parse_overrides(['nickname=abe'])


def test_parse_overrides_points_terms_to_accept_terms():
    with pytest.raises(ValueError, match='accept_terms'):
        parse_overrides(['terms=yes'])


def test_main_exits_on_missing_base_url(monkeypatch):
    monkeypatch.setattr(Settings, 'BASE_URL', None)

    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1


def test_main_rejects_bad_override():
    with pytest.raises(SystemExit) as excinfo:
        main(['--url', 'https://bugs-form.test/', '--set', 'nickname=abe'])

    assert excinfo.value.code == 2


def test_debug_flag_switches_logger_to_debug(monkeypatch):
    monkeypatch.setattr(Settings, 'BASE_URL', None)
    monkeypatch.setattr(Settings, 'LOG_LEVEL', 'INFO')

    with pytest.raises(SystemExit):
        main(['--debug'])

    assert logger.logger.level == logging.DEBUG
    logger.set_level('INFO')
