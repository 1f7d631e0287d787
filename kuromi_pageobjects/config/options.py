"""
Configuration options for kuromi-pageobjects.

Strongly-typed, validated options controlling descriptor registration and
selector resolution.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import (
    DEFAULT_LOG_QUERIES,
    DEFAULT_STRICT_SHAPES,
    DEFAULT_WAIT_TIMEOUT,
    DEFAULT_XPATH_PREFIX,
)


class PageObjectOptions(BaseModel):
    """Options for page object resolution.

    ``strict_shapes`` turns an unsupported property shape into an
    ``UnsupportedShapeError`` when a class is registered instead of silently
    disabling the property.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_shapes: bool = Field(
        DEFAULT_STRICT_SHAPES,
        description="Raise on unsupported selector property shapes",
    )
    xpath_prefix: str = Field(
        DEFAULT_XPATH_PREFIX,
        description="Selector engine prefix used for XPath queries",
    )
    wait_timeout: Optional[float] = Field(
        DEFAULT_WAIT_TIMEOUT,
        ge=0,
        description="Default wait_for_selector timeout in milliseconds",
    )
    log_queries: bool = Field(
        DEFAULT_LOG_QUERIES, description="Debug-log every issued query"
    )

    @field_validator("xpath_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("xpath_prefix must not be blank")
        return value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageObjectOptions":
        """Create options from dictionary."""
        return cls(**data)

    def merge(self, **overrides: Any) -> "PageObjectOptions":
        """Return a copy with ``overrides`` applied and validated."""
        data = self.model_dump()
        data.update(overrides)
        return PageObjectOptions(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert options to dictionary."""
        return self.model_dump()
