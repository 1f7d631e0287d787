"""Tests for resolving string annotations on selector properties."""

from __future__ import annotations

import logging
from typing import Optional

import pytest

from kuromi_pageobjects import (
    Cardinality,
    ElementHandle,
    ElementObject,
    PageObject,
    SelectorDescriptor,
    UnsupportedShapeError,
    configure,
    create_composite,
    get_descriptor,
    get_descriptors,
    selector,
)


class TestLocalClasses:
    """Classes defined inside a function body."""

    def test_local_target(self):
        """A locally defined target class resolves from the defining scope."""

        class Row(ElementObject):
            @selector(".name")
            def name(self) -> Optional[ElementHandle]: ...

        class Table(PageObject):
            @selector(".item")
            def rows(self) -> list[Row]: ...

        assert get_descriptor(Table, "rows") == SelectorDescriptor(".item", Row, Cardinality.MANY)
        assert get_descriptor(Row, "name") == SelectorDescriptor(
            ".name", ElementHandle, Cardinality.SINGLE
        )

    def test_local_class_annotation(self):
        """Class-annotated selectors can name local classes too."""

        class Cell(ElementObject):
            pass

        class Grid(PageObject):
            cells: list[Cell] = selector("td")
            first: Optional[Cell] = selector("td")

        descriptors = dict(get_descriptors(Grid))
        assert descriptors["cells"] == SelectorDescriptor("td", Cell, Cardinality.MANY)
        assert descriptors["first"] == SelectorDescriptor("td", Cell, Cardinality.SINGLE)

    def test_self_reference(self):
        """A local class can refer to itself."""

        class Node(ElementObject):
            @selector("li")
            def children(self) -> list[Node]: ...

        assert get_descriptor(Node, "children").target_type is Node

    @pytest.mark.asyncio
    async def test_local_objects_resolve(self, static_page):
        """Local page objects resolve against a page like module-level ones."""

        class Fruit(ElementObject):
            @selector(".name")
            def name(self) -> Optional[ElementHandle]: ...

        class Shop(PageObject):
            @selector(".item")
            def fruits(self) -> list[Fruit]: ...

        fruits = await create_composite(Shop, static_page).fruits

        assert len(fruits) == 3
        name = await fruits[0].name
        assert await name.text_content() == "Apple"


class TestUnrelatedAnnotations:
    """Only the selector's own annotation is evaluated."""

    def test_unresolvable_sibling_annotation(self, caplog):
        """An unresolvable non-selector annotation does not disable selectors."""

        class Checkout(PageObject):
            total: Decimal  # noqa: F821
            header: Optional[ElementHandle] = selector("#header")

        with caplog.at_level(logging.WARNING, logger="kuromi_pageobjects.registry"):
            descriptors = dict(get_descriptors(Checkout))

        assert descriptors == {
            "header": SelectorDescriptor("#header", ElementHandle, Cardinality.SINGLE)
        }
        assert caplog.text == ""

    def test_strict_ignores_sibling_annotation(self):
        """Strict mode does not blame a selector for another annotation."""
        configure(strict_shapes=True)

        class Checkout(PageObject):
            total: Decimal  # noqa: F821
            header: Optional[ElementHandle] = selector("#header")

        assert get_descriptor(Checkout, "header") is not None

    def test_strict_names_broken_selector(self):
        """Strict mode reports the selector whose own annotation is broken."""
        configure(strict_shapes=True)

        class Checkout(PageObject):
            total: Optional[ElementHandle] = selector("#total")
            coupon: Missing = selector("#coupon")  # noqa: F821

        with pytest.raises(UnsupportedShapeError) as exc_info:
            get_descriptors(Checkout)
        assert exc_info.value.name == "coupon"
