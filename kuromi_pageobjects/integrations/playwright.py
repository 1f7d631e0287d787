"""
Playwright integration.

Playwright's async ``Page``, ``Frame`` and ``ElementHandle`` already provide
``query_selector``, ``query_selector_all`` and ``wait_for_selector``, and an
element handle scopes queries to its own subtree. Registering them as
virtual subclasses lets page objects resolve against them directly and lets
``playwright.async_api.ElementHandle`` be used in selector annotations.

Example:
    from typing import Optional

    from playwright.async_api import ElementHandle, async_playwright

    import kuromi_pageobjects.integrations.playwright  # noqa: F401
    from kuromi_pageobjects import PageObject, create_composite, selector

    class SearchPage(PageObject):
        @selector("input[name=q]")
        def query(self) -> Optional[ElementHandle]: ...

    async with async_playwright() as p:
        browser = await p.chromium.launch()
        page = await browser.new_page()
        search = create_composite(SearchPage, page)
        field = await search.query
"""

from __future__ import annotations

import logging

from playwright.async_api import ElementHandle as PlaywrightElementHandle
from playwright.async_api import Frame, Page

from kuromi_pageobjects.interfaces import BrowsingContext, ElementHandle

logger = logging.getLogger(__name__)


def register() -> None:
    """Register Playwright's async types with the driver interfaces."""
    BrowsingContext.register(Page)
    BrowsingContext.register(Frame)
    ElementHandle.register(PlaywrightElementHandle)
    logger.debug("Registered Playwright Page, Frame and ElementHandle")


register()
