"""
Abstract driver interfaces for kuromi-pageobjects.

Page objects never talk to a browser directly. They issue queries against a
browsing context, which is any object implementing the interface below.
Driver classes that already expose these methods (Playwright's async Page,
Frame and ElementHandle, for example) are registered as virtual subclasses
instead of being wrapped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class BrowsingContext(ABC):
    """A page, frame or element that selector queries can be issued against.

    Page objects hold a non-owning reference to their context: closing or
    disposing it is the driver's responsibility.
    """

    @abstractmethod
    async def query_selector(self, selector: str) -> Optional["ElementHandle"]:
        """Find the first element matching the selector, or None."""
        ...

    @abstractmethod
    async def query_selector_all(self, selector: str) -> list["ElementHandle"]:
        """Find all elements matching the selector, in document order."""
        ...

    @abstractmethod
    async def wait_for_selector(
        self,
        selector: str,
        *,
        timeout: Optional[float] = None,
    ) -> Optional["ElementHandle"]:
        """Wait for an element matching the selector to appear."""
        ...


class ElementHandle(BrowsingContext):
    """Opaque reference to one DOM node.

    A handle is itself a browsing context: queries issued against it are
    scoped to the node's subtree.
    """


def as_context(handle: ElementHandle) -> BrowsingContext:
    """Return the browsing context that scopes queries to ``handle``.

    Element handles query their own subtree, so the handle is returned as-is.
    Drivers whose handles cannot be queried directly can expose an
    ``as_context()`` method returning a scoped context instead.
    """
    adapter = getattr(handle, "as_context", None)
    if callable(adapter):
        return adapter()
    return handle


def is_element_handle(obj: object) -> bool:
    """Whether ``obj`` is a (possibly virtual) ElementHandle instance."""
    return isinstance(obj, ElementHandle)
