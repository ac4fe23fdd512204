from typing import Optional

import pytest


MONEYCORPS_PAGE = """
<html>
  <head><title>Moneycorps</title></head>
  <body>
    <script>
      var tasas = { "monedas": [
        { "nombre": "USD", "compra": "62.30", "venta": "63.10" },
        { "nombre": "EUR", "compra": "67.80", "venta": "70.25" }
      ] };
    </script>
  </body>
</html>
"""

LABELED_PAGE = '<html><body><div class="rate"><span class="amt-change">RD$ 62.30</span></div></body></html>'


@pytest.fixture()
def moneycorps_page() -> str:
    return MONEYCORPS_PAGE


@pytest.fixture()
def labeled_page() -> str:
    return LABELED_PAGE


@pytest.fixture()
def fetch_factory():
    """Build a fetch coroutine function that returns a page (or raises) and counts calls"""

    def factory(page: str = LABELED_PAGE, error: Optional[Exception] = None):
        calls = {"count": 0}

        async def fetch() -> str:
            calls["count"] += 1
            if error is not None:
                raise error
            return page

        fetch.calls = calls
        return fetch

    return factory
