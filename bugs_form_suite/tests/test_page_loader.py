"""
Tests for navigation across pages and the Register click.
"""

import pytest

from browser.page_loader import PageLoader
from config.settings import Settings
from utils.errors import ConfigurationError
from fakes import FakePage, bugs_form_page


@pytest.mark.asyncio
async def test_missing_base_url_fails_before_navigation(monkeypatch):
    monkeypatch.setattr(Settings, 'BASE_URL', None)
    pages = [FakePage(), FakePage()]

    with pytest.raises(ConfigurationError, match='BASEURL'):
        await PageLoader.goto_all(pages)

    assert [p.visits for p in pages] == [[], []]


@pytest.mark.asyncio
async def test_goto_all_opens_base_url_on_every_page(monkeypatch):
    monkeypatch.setattr(Settings, 'BASE_URL', 'https://bugs-form.test/form')
    pages = [FakePage(), FakePage()]

    await PageLoader.goto_all(pages)

    assert [p.visits for p in pages] == [['https://bugs-form.test/form']] * 2


@pytest.mark.asyncio
async def test_explicit_url_wins_over_settings(monkeypatch):
    monkeypatch.setattr(Settings, 'BASE_URL', None)
    page = FakePage()

    await PageLoader.goto_all([page], 'file:///tmp/bugs-form.html')

    assert page.visits == ['file:///tmp/bugs-form.html']


@pytest.mark.asyncio
async def test_load_rejects_unsupported_scheme():
    with pytest.raises(ValueError, match='Invalid URL'):
        await PageLoader.load(FakePage(), 'ftp://bugs-form.test/')


@pytest.mark.asyncio
async def test_navigation_timeout_is_reported():
    page = FakePage(broken={'goto'})

    with pytest.raises(TimeoutError, match='Failed to load'):
        await PageLoader.load(page, 'https://bugs-form.test/', timeout=10)


@pytest.mark.asyncio
async def test_reload_all_reloads_every_page():
    pages = [FakePage(), FakePage()]

    await PageLoader.reload_all(pages)

    assert [p.reloads for p in pages] == [1, 1]


@pytest.mark.asyncio
async def test_click_register_all_clicks_each_button():
    pages = [bugs_form_page('https://one.test/'), bugs_form_page('https://two.test/')]

    await PageLoader.click_register_all(pages)

    assert [p.elements['register'].calls for p in pages] == [[('click',)], [('click',)]]


@pytest.mark.asyncio
async def test_load_and_reload_only_navigate():
    page = FakePage()

    assert await PageLoader.load(page, 'https://bugs-form.test/') is page
    assert await PageLoader.reload(page) is page

    assert page.visits == ['https://bugs-form.test/']
    assert page.reloads == 1
