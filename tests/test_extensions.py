"""Tests for typed query helpers."""

from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from kuromi_pageobjects import (
    ElementHandle,
    ElementObject,
    NoContextError,
    PageObject,
    configure,
    create_composite,
    query_selector_all_as,
    query_selector_as,
    selector,
    wait_for_selector_as,
    xpath_as,
)
from kuromi_pageobjects.static import WaitTimeoutError


class FruitObject(ElementObject):
    @selector(".name")
    def name(self) -> Optional[ElementHandle]: ...


class ShopPage(PageObject):
    pass


class TestQuerySelectorAs:
    """Tests for query_selector_as()."""

    @pytest.mark.asyncio
    async def test_returns_object(self, static_page):
        """The first match is wrapped."""
        fruit = await query_selector_as(static_page, ".item", FruitObject)

        assert isinstance(fruit, FruitObject)
        assert fruit.page is static_page
        name = await fruit.name
        assert await name.text_content() == "Apple"

    @pytest.mark.asyncio
    async def test_missing(self, static_page):
        """No match is None."""
        assert await query_selector_as(static_page, ".missing", FruitObject) is None

    @pytest.mark.asyncio
    async def test_element_context(self, static_page):
        """Queries on an element handle are scoped to it and have no page by default."""
        items = await static_page.query_selector_all(".item")

        fruit = await query_selector_as(items[2], "span", FruitObject)

        assert await fruit.element.text_content() == "Cherry"
        assert fruit.page is None

    @pytest.mark.asyncio
    async def test_explicit_page(self, static_page):
        """An explicit page is passed on."""
        item = await static_page.query_selector(".item")
        fruit = await query_selector_as(item, "span", FruitObject, page=static_page)
        assert fruit.page is static_page

    def test_rejects_non_element_object(self, static_page):
        """Only ElementObject subclasses can be targets."""
        with pytest.raises(TypeError):
            query_selector_as(static_page, ".item", ShopPage)
        with pytest.raises(TypeError):
            query_selector_as(static_page, ".item", dict)

    def test_no_context(self):
        """A None context fails at the call."""
        with pytest.raises(NoContextError):
            query_selector_as(None, ".item", FruitObject)


class TestQuerySelectorAllAs:
    """Tests for query_selector_all_as()."""

    @pytest.mark.asyncio
    async def test_returns_objects(self, static_page):
        """Every match is wrapped, in order."""
        fruits = await query_selector_all_as(static_page, ".item", FruitObject)

        assert len(fruits) == 3
        assert all(isinstance(f, FruitObject) for f in fruits)
        assert all(f.page is static_page for f in fruits)

    @pytest.mark.asyncio
    async def test_missing_is_empty(self, static_page):
        """No match is an empty list."""
        assert await query_selector_all_as(static_page, ".missing", FruitObject) == []


class TestXPathAs:
    """Tests for xpath_as()."""

    @pytest.mark.asyncio
    async def test_returns_objects(self, static_page):
        """XPath matches are wrapped."""
        fruits = await xpath_as(static_page, "//li[@class='item']", FruitObject)
        assert len(fruits) == 3

    @pytest.mark.asyncio
    async def test_missing_is_empty(self, static_page):
        """No match is an empty list."""
        assert await xpath_as(static_page, "//table", FruitObject) == []

    @pytest.mark.asyncio
    async def test_uses_prefix(self):
        """The expression is sent behind the configured prefix."""
        configure(xpath_prefix="x:")
        context = AsyncMock()
        context.query_selector_all = AsyncMock(return_value=[])

        await xpath_as(context, "//div", FruitObject)

        context.query_selector_all.assert_awaited_once_with("x://div")


class TestWaitForSelectorAs:
    """Tests for wait_for_selector_as()."""

    @pytest.mark.asyncio
    async def test_returns_object(self, static_page):
        """The waited-for element is wrapped."""
        fruit = await wait_for_selector_as(static_page, ".item", FruitObject)
        assert isinstance(fruit, FruitObject)

    @pytest.mark.asyncio
    async def test_timeout_propagates(self, static_page):
        """The driver's timeout error reaches the caller."""
        with pytest.raises(WaitTimeoutError):
            await wait_for_selector_as(static_page, ".missing", FruitObject, timeout=1)

    @pytest.mark.asyncio
    async def test_default_timeout(self):
        """The wait_timeout option is used when no timeout is given."""
        configure(wait_timeout=250)
        context = AsyncMock()
        context.wait_for_selector = AsyncMock(return_value=MagicMock(spec=ElementHandle))

        await wait_for_selector_as(context, "#x", FruitObject)

        context.wait_for_selector.assert_awaited_once_with("#x", timeout=250)

    @pytest.mark.asyncio
    async def test_explicit_timeout(self):
        """An explicit timeout wins over the option."""
        configure(wait_timeout=250)
        context = AsyncMock()
        context.wait_for_selector = AsyncMock(return_value=None)

        assert await wait_for_selector_as(context, "#x", FruitObject, timeout=10) is None
        context.wait_for_selector.assert_awaited_once_with("#x", timeout=10)


class TestCompositeQueries:
    """Typed query methods on composite objects."""

    @pytest.mark.asyncio
    async def test_page_object_methods(self, static_page):
        """Page object methods query the page."""
        shop = create_composite(ShopPage, static_page)

        assert len(await shop.query_selector_all(".item", FruitObject)) == 3
        assert isinstance(await shop.query_selector(".item", FruitObject), FruitObject)
        assert len(await shop.xpath("//li", FruitObject)) == 3
        assert isinstance(await shop.wait_for_selector("#header", FruitObject), FruitObject)

    @pytest.mark.asyncio
    async def test_element_object_methods(self, static_page):
        """Element object methods are scoped to the element and keep the page."""
        shop = create_composite(ShopPage, static_page)
        fruit = await shop.query_selector(".item", FruitObject)

        spans = await fruit.query_selector_all("span", FruitObject)
        relative = await fruit.xpath("//span", FruitObject)

        assert len(spans) == 2
        assert len(relative) == 2
        assert all(s.page is static_page for s in spans)


class TestCreateComposite:
    """Tests for create_composite()."""

    def test_page_object(self, static_page):
        """Page objects use the context as their page."""
        shop = create_composite(ShopPage, static_page)
        assert shop.context is static_page
        assert shop.page is static_page

    @pytest.mark.asyncio
    async def test_element_object(self, static_page):
        """Element objects can be roots too."""
        item = await static_page.query_selector(".item")
        fruit = create_composite(FruitObject, item)
        assert fruit.element is item

    def test_no_context(self):
        """A None context is rejected."""
        with pytest.raises(NoContextError):
            create_composite(ShopPage, None)

    def test_bad_class(self, static_page):
        """Only composite classes are accepted."""
        with pytest.raises(TypeError):
            create_composite(object, static_page)

    def test_context_cannot_be_reassigned(self, static_page):
        """The context reference is fixed at construction."""
        shop = create_composite(ShopPage, static_page)
        with pytest.raises(AttributeError):
            shop.context = None
        with pytest.raises(AttributeError):
            shop._context = None
