"""
End-to-end conversion flow with an injected fetch

✅ Input errors never fetch
✅ Fetch / extraction errors become one invalid item
✅ Full output for both page formats
"""

import io
import json

import pytest

from capla_converter import cli
from capla_converter.domain.errors import FetchError
from capla_converter.services.conversion_service import ConversionService


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "query,title",
    [
        ("", "Enter an amount to convert"),
        ("   ", "Enter an amount to convert"),
        ("abc", "Please enter a valid number"),
        ("0", "Please enter a valid number"),
        ("-100 63.25", "Please enter a valid number"),
        ("1000 nope", "Please enter a valid bank rate as second argument"),
        ("1000 0", "Please enter a valid bank rate as second argument"),
    ],
)
async def test_input_errors_do_not_fetch(fetch_factory, query, title):
    fetch = fetch_factory()
    items = await ConversionService(fetch).run(query)

    assert len(items) == 1
    assert items[0].title == title
    assert items[0].valid is False
    assert fetch.calls["count"] == 0


@pytest.mark.asyncio
async def test_simple_conversion(fetch_factory, labeled_page):
    fetch = fetch_factory(labeled_page)
    items = await ConversionService(fetch).run("250")

    assert fetch.calls["count"] == 1
    assert len(items) == 1
    assert items[0].title == "💱 Capla: 250 USD = 15,240.14 DOP"
    assert items[0].valid is True


@pytest.mark.asyncio
async def test_conversion_with_bank_rate(fetch_factory, moneycorps_page):
    items = await ConversionService(fetch_factory(moneycorps_page)).run("1,000 63.25")

    assert [item.title for item in items] == [
        "💱 Capla: 1,000 USD = 61,895.05 DOP",
        "🏦 Bank: 1,000 USD = 63,250 DOP",
        "📉 Loss: 1,354.95 DOP",
    ]


@pytest.mark.asyncio
async def test_separator_and_plain_amounts_agree(fetch_factory):
    service = ConversionService(fetch_factory())
    assert await service.run("1,000") == await service.run("1000")


@pytest.mark.asyncio
async def test_fetch_error_becomes_item(fetch_factory):
    fetch = fetch_factory(error=FetchError())
    items = await ConversionService(fetch).run("1000")

    assert len(items) == 1
    assert items[0].title == "Error fetching exchange rates"
    assert items[0].subtitle == "Please try again later"
    assert items[0].valid is False


@pytest.mark.asyncio
async def test_extraction_error_becomes_item(fetch_factory):
    fetch = fetch_factory('<div class="other-class">No rate here</div>')
    items = await ConversionService(fetch).run("1000 63.25")

    assert len(items) == 1
    assert items[0].subtitle == "Could not find exchange rate on the page"
    assert items[0].valid is False


def _run_cli(monkeypatch, page):
    async def fake_fetch(self, url=None, timeout=None):
        return page

    monkeypatch.setattr(cli.RateSourceClient, "fetch_document", fake_fetch)
    out = io.StringIO()
    exit_code = cli.main(["1,000", "63.25"], out=out)
    return exit_code, json.loads(out.getvalue())


def test_cli_prints_script_filter_payload(monkeypatch, labeled_page):
    exit_code, payload = _run_cli(monkeypatch, labeled_page)

    assert exit_code == 0
    items = payload["items"]
    assert len(items) == 3
    assert items[0] == {
        "title": "💱 Capla: 1,000 USD = 61,895.05 DOP",
        "subtitle": "Fees: $5 + $1.50 tax = -$6.50 | Rate: 62.30 DOP",
        "valid": True,
        "arg": "61,895.05",
    }


def test_cli_error_item_has_no_arg(monkeypatch):
    exit_code, payload = _run_cli(monkeypatch, "<html></html>")

    assert exit_code == 0
    assert payload["items"] == [
        {
            "title": "Error fetching exchange rates",
            "subtitle": "Could not find exchange rate on the page",
            "valid": False,
        }
    ]


def test_cli_unexpected_failure_is_contained(monkeypatch):
    async def boom(self, query):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(cli.ConversionService, "run", boom)
    out = io.StringIO()

    assert cli.main(["1000"], out=out) == 0
    item = json.loads(out.getvalue())["items"][0]
    assert item["subtitle"] == "Please try again later"
    assert item["valid"] is False


@pytest.mark.asyncio
async def test_very_large_amount_converts(fetch_factory, labeled_page):
    items = await ConversionService(fetch_factory(labeled_page)).run("10000000000000000000000000")

    assert len(items) == 1
    assert items[0].valid is True
    assert items[0].title == (
        "💱 Capla: 10,000,000,000,000,000,000,000,000 USD = "
        "622,065,499,999,999,999,999,999,688.50 DOP"
    )
