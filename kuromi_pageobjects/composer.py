"""
Wraps raw element handles into typed element objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from kuromi_pageobjects.models import SelectorDescriptor

if TYPE_CHECKING:
    from kuromi_pageobjects.interfaces import BrowsingContext


def wrap(raw: Any, descriptor: SelectorDescriptor, page: Optional["BrowsingContext"] = None) -> Any:
    """Deliver a resolution result in the shape ``descriptor`` declares.

    Handle targets are returned untouched. For element object targets each
    handle becomes a new ``descriptor.target_type`` scoped to that handle;
    a missing SINGLE result stays None and MANY results keep their order
    and length. None of the new objects' own selectors are resolved here.

    Args:
        raw: Result of resolving the descriptor.
        descriptor: Descriptor that produced ``raw``.
        page: Root page handed down to the new element objects.
    """
    if not descriptor.is_composite:
        return raw

    target = descriptor.target_type

    if descriptor.is_many:
        return [target(handle, page=page) for handle in raw]

    if raw is None:
        return None
    return target(raw, page=page)
