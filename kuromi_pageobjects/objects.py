"""
Page object base classes.

A composite object wraps a browsing context: ``PageObject`` a page or
frame, ``ElementObject`` a single element handle. Subclasses declare their
content with ``selector`` properties; every read queries the context again.
Composite objects never own their context and never close it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Optional, TypeVar

from kuromi_pageobjects.interfaces import as_context
from kuromi_pageobjects.resolution import require_context

if TYPE_CHECKING:
    from kuromi_pageobjects.interfaces import BrowsingContext, ElementHandle

T = TypeVar("T", bound="ElementObject")
C = TypeVar("C", bound="CompositeObject")

_FROZEN = ("_context", "_page", "_element")


class CompositeObject:
    """Base class for page and element objects.

    Attributes:
        context: Browsing context selector properties are resolved against.
        page: Root page the object belongs to, if known.
    """

    def __init__(
        self,
        context: Optional["BrowsingContext"],
        page: Optional["BrowsingContext"] = None,
    ) -> None:
        self._context = context
        self._page = page

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FROZEN and name in self.__dict__:
            raise AttributeError(f"{name.lstrip('_')} cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def context(self) -> Optional["BrowsingContext"]:
        return self._context

    @property
    def page(self) -> Optional["BrowsingContext"]:
        return self._page

    # Typed queries scoped to this object's context

    def query_selector(self, selector: str, cls: type[T]) -> Awaitable[Optional[T]]:
        """Find the first element matching ``selector`` as a ``cls``."""
        from kuromi_pageobjects.extensions import query_selector_as

        return query_selector_as(self._context, selector, cls, page=self._page)

    def query_selector_all(self, selector: str, cls: type[T]) -> Awaitable[list[T]]:
        """Find all elements matching ``selector`` as ``cls`` instances."""
        from kuromi_pageobjects.extensions import query_selector_all_as

        return query_selector_all_as(self._context, selector, cls, page=self._page)

    def xpath(self, expression: str, cls: type[T]) -> Awaitable[list[T]]:
        """Find all elements matching an XPath ``expression`` as ``cls`` instances."""
        from kuromi_pageobjects.extensions import xpath_as

        return xpath_as(self._context, expression, cls, page=self._page)

    def wait_for_selector(
        self,
        selector: str,
        cls: type[T],
        *,
        timeout: Optional[float] = None,
    ) -> Awaitable[Optional[T]]:
        """Wait for an element matching ``selector`` and return it as a ``cls``."""
        from kuromi_pageobjects.extensions import wait_for_selector_as

        return wait_for_selector_as(
            self._context, selector, cls, timeout=timeout, page=self._page
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(context={self._context!r})"


class PageObject(CompositeObject):
    """Composite object rooted at a page or frame."""

    def __init__(self, page: Optional["BrowsingContext"]) -> None:
        super().__init__(page, page=page)


class ElementObject(CompositeObject):
    """Composite object scoped to one element.

    Selector properties of an element object only match inside the element.
    """

    def __init__(
        self,
        element: Optional["ElementHandle"],
        page: Optional["BrowsingContext"] = None,
    ) -> None:
        context = as_context(element) if element is not None else None
        super().__init__(context, page=page)
        self._element = element

    @property
    def element(self) -> Optional["ElementHandle"]:
        """The element handle this object wraps."""
        return self._element

    def __repr__(self) -> str:
        return f"{type(self).__name__}(element={self._element!r})"


def create_composite(cls: type[C], context: "BrowsingContext") -> C:
    """Create the root composite object for ``context``.

    Args:
        cls: PageObject subclass, or ElementObject subclass for an element
            handle context.
        context: Page, frame or element handle to resolve against.

    Raises:
        NoContextError: If ``context`` is None.
        TypeError: If ``cls`` is not a PageObject or ElementObject subclass.
    """
    require_context(context)

    if isinstance(cls, type) and issubclass(cls, (PageObject, ElementObject)):
        return cls(context)
    raise TypeError(f"{cls!r} is not a PageObject or ElementObject subclass")


create_page_object = create_composite
