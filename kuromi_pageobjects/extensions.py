"""
Typed queries returning element objects.

These helpers run a single query against any browsing context and wrap the
matches into an ElementObject subclass, for code that resolves selectors
explicitly instead of declaring ``selector`` properties:

    results = await query_selector_all_as(page, ".result", ResultObject)
    banner = await wait_for_selector_as(page, "#banner", BannerObject, timeout=5000)

The browsing context is checked when the helper is called, not when its
result is awaited. Driver errors, including wait timeouts, propagate
unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Optional, TypeVar

from kuromi_pageobjects.composer import wrap
from kuromi_pageobjects.config import get_options
from kuromi_pageobjects.interfaces import is_element_handle
from kuromi_pageobjects.models import Cardinality, SelectorDescriptor
from kuromi_pageobjects.objects import ElementObject
from kuromi_pageobjects.resolution import require_context, resolve

if TYPE_CHECKING:
    from kuromi_pageobjects.interfaces import BrowsingContext

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ElementObject)


def _descriptor(selector: str, cls: type, cardinality: Cardinality) -> SelectorDescriptor:
    if not (isinstance(cls, type) and issubclass(cls, ElementObject)):
        raise TypeError(f"{cls!r} is not an ElementObject subclass")
    return SelectorDescriptor(selector, cls, cardinality)


def _page_for(context: Any, page: Optional["BrowsingContext"]) -> Optional["BrowsingContext"]:
    if page is not None:
        return page
    return None if is_element_handle(context) else context


async def _resolve_as(
    context: "BrowsingContext",
    descriptor: SelectorDescriptor,
    page: Optional["BrowsingContext"],
) -> Any:
    return wrap(await resolve(context, descriptor), descriptor, page)


def query_selector_as(
    context: "BrowsingContext",
    selector: str,
    cls: type[T],
    *,
    page: Optional["BrowsingContext"] = None,
) -> Awaitable[Optional[T]]:
    """Find the first element matching ``selector`` and wrap it as ``cls``.

    Args:
        context: Page, frame or element handle to query.
        selector: Selector to query for.
        cls: ElementObject subclass to wrap the match in.
        page: Root page for the new object. Defaults to ``context`` unless
            it is an element handle.

    Returns:
        Awaitable resolving to a ``cls`` instance, or None if nothing matches.
    """
    require_context(context, selector)
    descriptor = _descriptor(selector, cls, Cardinality.SINGLE)
    return _resolve_as(context, descriptor, _page_for(context, page))


def query_selector_all_as(
    context: "BrowsingContext",
    selector: str,
    cls: type[T],
    *,
    page: Optional["BrowsingContext"] = None,
) -> Awaitable[list[T]]:
    """Find all elements matching ``selector`` and wrap each as ``cls``.

    Returns:
        Awaitable resolving to a list in document order, empty if nothing
        matches.
    """
    require_context(context, selector)
    descriptor = _descriptor(selector, cls, Cardinality.MANY)
    return _resolve_as(context, descriptor, _page_for(context, page))


def xpath_as(
    context: "BrowsingContext",
    expression: str,
    cls: type[T],
    *,
    page: Optional["BrowsingContext"] = None,
) -> Awaitable[list[T]]:
    """Find all elements matching an XPath expression and wrap each as ``cls``.

    The expression is passed to ``query_selector_all`` behind the configured
    ``xpath_prefix`` selector engine prefix.
    """
    require_context(context, expression)
    selector = f"{get_options().xpath_prefix}{expression}"
    descriptor = _descriptor(selector, cls, Cardinality.MANY)
    return _resolve_as(context, descriptor, _page_for(context, page))


def wait_for_selector_as(
    context: "BrowsingContext",
    selector: str,
    cls: type[T],
    *,
    timeout: Optional[float] = None,
    page: Optional["BrowsingContext"] = None,
) -> Awaitable[Optional[T]]:
    """Wait for an element matching ``selector`` and wrap it as ``cls``.

    Args:
        timeout: Milliseconds to wait, defaulting to the ``wait_timeout``
            option. None leaves the driver's own default in place.

    Returns:
        Awaitable resolving to a ``cls`` instance, or None if the driver's
        wait yields no element.
    """
    require_context(context, selector)
    descriptor = _descriptor(selector, cls, Cardinality.SINGLE)
    if timeout is None:
        timeout = get_options().wait_timeout
    return _wait_as(context, descriptor, timeout, _page_for(context, page))


async def _wait_as(
    context: "BrowsingContext",
    descriptor: SelectorDescriptor,
    timeout: Optional[float],
    page: Optional["BrowsingContext"],
) -> Any:
    logger.debug(f"Waiting for {descriptor.selector!r} (timeout={timeout})")
    handle = await context.wait_for_selector(descriptor.selector, timeout=timeout)
    return wrap(handle, descriptor, page)
