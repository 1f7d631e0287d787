"""
Static HTML browsing context.

An lxml-backed implementation of the driver interfaces for HTML that is
already in hand, such as an HTTP response body. Page objects work against
it the same way they work against a live browser page, which makes it
useful for scraping and for testing page objects offline.

Example:
    page = StaticPage.from_html(response.text, url=response.url)
    listing = ListPage(page)
    for item in await listing.items:
        print(await item.element.text_content())
"""

from __future__ import annotations

from typing import Optional

from lxml import html
from lxml.etree import ParserError, XPathError, _Element, tostring

from kuromi_pageobjects.interfaces import BrowsingContext, ElementHandle

XPATH_ENGINE = "xpath="
CSS_ENGINE = "css="

EMPTY_DOCUMENT = "<html><head></head><body></body></html>"


class WaitTimeoutError(TimeoutError):
    """Raised when a waited-for selector does not match."""

    def __init__(self, selector: str, timeout: Optional[float]) -> None:
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"Timeout {timeout}ms waiting for selector {selector!r}")


def _parse(content: str) -> _Element:
    if not content or not content.strip():
        content = EMPTY_DOCUMENT
    try:
        return html.document_fromstring(content)
    except ParserError:
        return html.document_fromstring(EMPTY_DOCUMENT)


def _select(root: _Element, selector: str, scoped: bool) -> list[_Element]:
    """Run ``selector`` against ``root``.

    Selectors prefixed with ``xpath=`` are XPath, anything else is CSS. In
    a scoped (element) context, absolute XPath is made relative and the
    element itself is never part of its own results.
    """
    if selector.startswith(XPATH_ENGINE):
        expression = selector[len(XPATH_ENGINE):]
        if scoped and expression.startswith("/"):
            expression = "." + expression
        try:
            results = root.xpath(expression)
        except XPathError as e:
            raise ValueError(f"Invalid XPath {expression!r}: {e}") from e
    else:
        if selector.startswith(CSS_ENGINE):
            selector = selector[len(CSS_ENGINE):]
        results = root.cssselect(selector)

    return [
        el for el in results
        if isinstance(el, _Element) and not (scoped and el is root)
    ]


class StaticElement(ElementHandle):
    """Element handle wrapping an lxml element."""

    def __init__(self, element: _Element, page: Optional["StaticPage"] = None) -> None:
        self._element = element
        self._page = page

    @property
    def page(self) -> Optional["StaticPage"]:
        return self._page

    @property
    def tag_name(self) -> str:
        return str(self._element.tag).lower()

    async def query_selector(self, selector: str) -> Optional["StaticElement"]:
        elements = await self.query_selector_all(selector)
        return elements[0] if elements else None

    async def query_selector_all(self, selector: str) -> list["StaticElement"]:
        return [
            StaticElement(el, self._page)
            for el in _select(self._element, selector, scoped=True)
        ]

    async def wait_for_selector(
        self,
        selector: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional["StaticElement"]:
        """Static content never changes, so this resolves or fails at once."""
        element = await self.query_selector(selector)
        if element is None:
            raise WaitTimeoutError(selector, timeout)
        return element

    async def get_attribute(self, name: str) -> Optional[str]:
        return self._element.get(name)

    async def text_content(self) -> str:
        return self._element.text_content()

    async def inner_html(self) -> str:
        parts = [self._element.text or ""]
        for child in self._element:
            parts.append(tostring(child, encoding="unicode", method="html"))
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticElement):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return hash(id(self._element))

    def __repr__(self) -> str:
        return f"<StaticElement {self.tag_name}>"


class StaticPage(BrowsingContext):
    """Browsing context over a parsed HTML document."""

    def __init__(self, content: str = "", url: Optional[str] = None) -> None:
        self._root = _parse(content)
        self._url = url

    @classmethod
    def from_html(cls, content: str, url: Optional[str] = None) -> "StaticPage":
        """Create a StaticPage from an HTML string."""
        return cls(content, url=url)

    @property
    def url(self) -> Optional[str]:
        return self._url

    async def set_content(self, content: str) -> None:
        """Replace the document. Existing handles keep the old tree."""
        self._root = _parse(content)

    async def content(self) -> str:
        return tostring(self._root, encoding="unicode", method="html")

    async def title(self) -> str:
        titles = self._root.xpath("//title")
        return titles[0].text_content().strip() if titles else ""

    async def query_selector(self, selector: str) -> Optional[StaticElement]:
        elements = await self.query_selector_all(selector)
        return elements[0] if elements else None

    async def query_selector_all(self, selector: str) -> list[StaticElement]:
        return [
            StaticElement(el, self)
            for el in _select(self._root, selector, scoped=False)
        ]

    async def wait_for_selector(
        self,
        selector: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional[StaticElement]:
        """Resolve immediately, raising WaitTimeoutError if nothing matches."""
        element = await self.query_selector(selector)
        if element is None:
            raise WaitTimeoutError(selector, timeout)
        return element

    def __repr__(self) -> str:
        return f"<StaticPage url={self._url!r}>"
