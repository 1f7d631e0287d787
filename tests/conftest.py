"""Shared fixtures for kuromi-pageobjects tests."""

import pytest

from kuromi_pageobjects import clear_registry, reset_options
from kuromi_pageobjects.static import StaticPage

LIST_HTML = """
<html>
  <head><title>Fruit Shop</title></head>
  <body>
    <div id="header">Fruit Shop</div>
    <ul id="list">
      <li class="item"><span class="name">Apple</span><span class="price">1.20</span></li>
      <li class="item"><span class="name">Banana</span><span class="price">0.50</span></li>
      <li class="item"><span class="name">Cherry</span><span class="price">3.00</span></li>
    </ul>
  </body>
</html>
"""


@pytest.fixture(autouse=True)
def fresh_state():
    """Start every test with default options and an empty registry."""
    reset_options()
    clear_registry()
    yield
    reset_options()
    clear_registry()


@pytest.fixture
def static_page():
    """Static page holding the fruit list."""
    return StaticPage.from_html(LIST_HTML, url="https://shop.example.com/")
