"""
The ``selector`` property decorator.

Usage:

    class ListPage(PageObject):
        @selector("#header")
        def header(self) -> Optional[ElementHandle]: ...

        @selector(".item")
        def items(self) -> list[ItemObject]: ...

    page_object = ListPage(page)
    items = await page_object.items

The decorated function body is never called: its return annotation
declares the result shape. Reading the attribute returns an awaitable that
resolves the selector against the object's browsing context.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Mapping, Optional

from kuromi_pageobjects.dispatcher import dispatch


class SelectorProperty:
    """Data descriptor carrying a selector for a page object attribute.

    The shape can come from the decorated getter's return annotation or,
    when used as a plain class attribute, from the class annotation:

        items: list[ItemObject] = selector(".item")
    """

    def __init__(self, selector: str, fget: Optional[Callable[..., Any]] = None) -> None:
        if not isinstance(selector, str):
            raise TypeError(f"selector must be a string, got {type(selector).__name__}")
        if not selector.strip():
            raise ValueError("selector must not be empty")

        self.selector = selector
        self.fget = fget
        self.name: Optional[str] = None
        self.owner: Optional[type] = None
        self.scope: Optional[Mapping[str, Any]] = None
        self.__doc__ = getattr(fget, "__doc__", None)

    def __call__(self, fget: Callable[..., Any]) -> "SelectorProperty":
        self.fget = fget
        self.__doc__ = fget.__doc__
        return self

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner
        self.name = name
        # Called while the class statement runs, so the caller is the scope
        # defining the class. Its names resolve string annotations later.
        self.scope = sys._getframe(1).f_locals

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return dispatch(instance, self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"selector property {self.name!r} is read-only")

    def __repr__(self) -> str:
        return f"SelectorProperty({self.selector!r}, name={self.name!r})"


def selector(value: str) -> SelectorProperty:
    """Declare a selector-resolved property.

    Args:
        value: Selector to query the object's browsing context with.
    """
    return SelectorProperty(value)
