"""
Dispatches selector property reads to asynchronous resolution.

Reading a selector property never blocks. It returns an ``asyncio.Task``
that queries the browsing context, wraps the result and completes exactly
once, either with the value or with the exception raised while resolving.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

from kuromi_pageobjects.composer import wrap
from kuromi_pageobjects.models import SelectorDescriptor
from kuromi_pageobjects.registry import get_descriptor
from kuromi_pageobjects.resolution import require_context, resolve

if TYPE_CHECKING:
    from kuromi_pageobjects.interfaces import BrowsingContext
    from kuromi_pageobjects.objects import CompositeObject

logger = logging.getLogger(__name__)


async def resolve_and_wrap(
    context: "BrowsingContext",
    descriptor: SelectorDescriptor,
    page: Optional["BrowsingContext"] = None,
) -> Any:
    """Resolve ``descriptor`` against ``context`` and wrap the result."""
    raw = await resolve(context, descriptor)
    return wrap(raw, descriptor, page)


def dispatch(instance: "CompositeObject", name: Optional[str]) -> Optional["asyncio.Task[Any]"]:
    """Handle a read of selector property ``name`` on ``instance``.

    Returns:
        None when the property has no descriptor (unsupported shape), in
        which case nothing is queried. Otherwise a pending task.

    Raises:
        NoContextError: If the instance has no browsing context.
        RuntimeError: If called outside a running event loop.
    """
    descriptor = get_descriptor(type(instance), name)
    if descriptor is None:
        logger.debug(f"{type(instance).__qualname__}.{name} has no selector descriptor")
        return None

    context = require_context(instance.context, descriptor.selector)
    loop = asyncio.get_running_loop()
    return loop.create_task(
        resolve_and_wrap(context, descriptor, instance.page),
        name=f"resolve {type(instance).__qualname__}.{name}",
    )
