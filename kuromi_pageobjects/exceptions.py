"""
Exceptions raised by kuromi-pageobjects.

Errors from the underlying browser driver are never wrapped; they reach the
caller unchanged.
"""

from __future__ import annotations

from typing import Any, Optional


class PageObjectError(Exception):
    """Base class for page object errors."""

    pass


class NoContextError(PageObjectError, ValueError):
    """Raised when a selector is resolved without a browsing context."""

    def __init__(self, selector: Optional[str] = None) -> None:
        self.selector = selector
        if selector is None:
            message = "No browsing context attached"
        else:
            message = f"No browsing context attached to resolve {selector!r}"
        super().__init__(message)


class UnsupportedShapeError(PageObjectError, TypeError):
    """Raised in strict mode for a selector property with an unsupported shape."""

    def __init__(self, owner: type, name: str, annotation: Any) -> None:
        self.owner = owner
        self.name = name
        self.annotation = annotation
        super().__init__(
            f"{owner.__qualname__}.{name}: unsupported selector shape {annotation!r}; "
            "expected an element handle, a composite element object, or a list of either"
        )


class ConfigurationError(PageObjectError):
    """Configuration loading or validation error."""

    pass
