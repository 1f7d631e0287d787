"""
Selector resolution against a browsing context.

Every call issues a fresh query: nothing is cached and nothing is retried.
Driver errors propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Optional, Union

from kuromi_pageobjects.config import get_options
from kuromi_pageobjects.exceptions import NoContextError
from kuromi_pageobjects.models import SelectorDescriptor

if TYPE_CHECKING:
    from kuromi_pageobjects.interfaces import BrowsingContext, ElementHandle

logger = logging.getLogger(__name__)

RawResult = Union["ElementHandle", None, list["ElementHandle"]]


def require_context(context: Any, selector: Optional[str] = None) -> "BrowsingContext":
    """Return ``context``, raising NoContextError if it is None."""
    if context is None:
        raise NoContextError(selector)
    return context


def resolve(context: "BrowsingContext", descriptor: SelectorDescriptor) -> Awaitable[RawResult]:
    """Query ``context`` for ``descriptor``.

    The context is checked before anything is scheduled, so a missing
    context raises NoContextError here rather than when awaited.

    Returns:
        Awaitable resolving to the matched handle or None for SINGLE
        descriptors, and to a (possibly empty) list of handles for MANY.
    """
    require_context(context, descriptor.selector)
    return _query(context, descriptor)


async def _query(context: "BrowsingContext", descriptor: SelectorDescriptor) -> RawResult:
    if get_options().log_queries:
        logger.debug(
            f"Querying {descriptor.cardinality.value} {descriptor.selector!r} on {context!r}"
        )

    if descriptor.is_many:
        handles = await context.query_selector_all(descriptor.selector)
        return list(handles) if handles is not None else []

    return await context.query_selector(descriptor.selector)
