"""
Data models for kuromi-pageobjects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kuromi_pageobjects.interfaces import ElementHandle


class Cardinality(str, Enum):
    """How many results a selector resolves to."""

    SINGLE = "single"
    MANY = "many"


@dataclass(frozen=True)
class SelectorDescriptor:
    """Immutable selector metadata for one page object property.

    Attributes:
        selector: Selector passed to the browsing context.
        target_type: Element handle class or ElementObject subclass the
            results are delivered as.
        cardinality: SINGLE resolves to one result or None, MANY to a list.
    """

    selector: str
    target_type: type
    cardinality: Cardinality

    @property
    def is_many(self) -> bool:
        return self.cardinality is Cardinality.MANY

    @property
    def is_composite(self) -> bool:
        """Whether results are wrapped into element objects."""
        return not issubclass(self.target_type, ElementHandle)
