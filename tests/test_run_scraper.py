"""Command line surface: argument defaults and exit codes. The scrape itself is stubbed."""

import asyncio
import logging

import pytest

import run_scraper
from catalog_scraper import config
from catalog_scraper.exceptions import CatalogAssemblyError


@pytest.fixture(autouse=True)
def no_log_setup(monkeypatch):
    monkeypatch.setattr(run_scraper, "configure_logging", lambda level: logging.getLogger().setLevel(level))


def test_defaults():
    args = run_scraper.build_parser().parse_args([])
    assert args.json is True
    assert args.max_products == config.MAX_PRODUCTS
    assert args.strategy == "script"
    assert args.output is None


def test_no_json_flag():
    assert run_scraper.build_parser().parse_args(["--no-json"]).json is False


def test_success_exits_zero(monkeypatch):
    received = {}

    async def fake_scrape(**kwargs):
        received.update(kwargs)

    monkeypatch.setattr(run_scraper, "run_scraper", fake_scrape)

    assert run_scraper.run(["--no-json", "--max-products", "5", "--strategy", "html"]) == 0
    assert received["output_json"] is False
    assert received["max_products"] == 5
    assert received["strategy"] == "html"
    assert received["headless"] is True


def test_assembly_error_exits_non_zero(monkeypatch):
    async def failing_scrape(**kwargs):
        raise CatalogAssemblyError(2, 10)

    monkeypatch.setattr(run_scraper, "run_scraper", failing_scrape)

    assert run_scraper.run([]) == 1


def test_timeout_exits_non_zero(monkeypatch):
    async def slow_scrape(**kwargs):
        raise asyncio.TimeoutError()

    monkeypatch.setattr(run_scraper, "run_scraper", slow_scrape)

    assert run_scraper.run(["--timeout", "0.1"]) == 1


def test_negative_max_products_rejected():
    with pytest.raises(SystemExit):
        run_scraper.run(["--max-products", "-3"])
