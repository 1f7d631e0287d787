"""
kuromi-pageobjects: Lazy, selector-driven page objects for browser automation.

Page objects declare their content as selector properties. Reading a
property queries the live browsing context and resolves to an element
handle, a list of handles, a nested element object or a list of them.

Basic usage:
    from typing import Optional

    from kuromi_pageobjects import (
        ElementHandle,
        ElementObject,
        PageObject,
        create_composite,
        selector,
    )

    class ItemObject(ElementObject):
        @selector(".name")
        def name(self) -> Optional[ElementHandle]: ...

    class ListPage(PageObject):
        @selector("#header")
        def header(self) -> Optional[ElementHandle]: ...

        @selector(".item")
        def items(self) -> list[ItemObject]: ...

    listing = create_composite(ListPage, page)
    for item in await listing.items:
        name = await item.name

Offline usage with parsed HTML:
    from kuromi_pageobjects.static import StaticPage

    listing = create_composite(ListPage, StaticPage.from_html(html))
"""

__version__ = "0.1.0"
__license__ = "MIT"

from kuromi_pageobjects.config import (
    PageObjectOptions,
    configure,
    get_options,
    load_options,
    reset_options,
)
from kuromi_pageobjects.exceptions import (
    ConfigurationError,
    NoContextError,
    PageObjectError,
    UnsupportedShapeError,
)
from kuromi_pageobjects.interfaces import BrowsingContext, ElementHandle, as_context
from kuromi_pageobjects.models import Cardinality, SelectorDescriptor
from kuromi_pageobjects.objects import (
    CompositeObject,
    ElementObject,
    PageObject,
    create_composite,
    create_page_object,
)
from kuromi_pageobjects.resolution import resolve
from kuromi_pageobjects.composer import wrap
from kuromi_pageobjects.registry import (
    clear_registry,
    get_descriptor,
    get_descriptors,
    register,
)
from kuromi_pageobjects.dispatcher import dispatch, resolve_and_wrap
from kuromi_pageobjects.selectors import SelectorProperty, selector
from kuromi_pageobjects.extensions import (
    query_selector_all_as,
    query_selector_as,
    wait_for_selector_as,
    xpath_as,
)

__all__ = [
    # Version
    "__version__",
    # Page objects
    "CompositeObject",
    "PageObject",
    "ElementObject",
    "create_composite",
    "create_page_object",
    "selector",
    "SelectorProperty",
    # Descriptors
    "Cardinality",
    "SelectorDescriptor",
    "get_descriptors",
    "get_descriptor",
    "register",
    "clear_registry",
    # Resolution
    "resolve",
    "wrap",
    "dispatch",
    "resolve_and_wrap",
    # Typed queries
    "query_selector_as",
    "query_selector_all_as",
    "xpath_as",
    "wait_for_selector_as",
    # Driver interfaces
    "BrowsingContext",
    "ElementHandle",
    "as_context",
    # Configuration
    "PageObjectOptions",
    "get_options",
    "configure",
    "reset_options",
    "load_options",
    # Exceptions
    "PageObjectError",
    "NoContextError",
    "UnsupportedShapeError",
    "ConfigurationError",
]
