"""Tests for the Playwright scraper, with the browser replaced by mocks."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from playwright.sync_api import Error as PlaywrightError

from html_fixtures import page_html, review_html
from tap_shopify_reviews.errors import ExtractionError
from tap_shopify_reviews.scraper import ShopifyReviewsScraper


def _mock_playwright(page_content: str = "", buttons=None):
    """Return (sync_playwright mock, browser mock, page mock)."""
    playwright = MagicMock()
    p = playwright.return_value.__enter__.return_value
    browser = p.chromium.launch.return_value
    page = browser.new_page.return_value
    page.content.return_value = page_content
    page.query_selector_all.return_value = buttons or []
    return playwright, browser, page


def _scraper() -> ShopifyReviewsScraper:
    return ShopifyReviewsScraper(initial_wait_ms=0, scroll_wait_ms=0, expand_wait_ms=0)


def test_scrape_returns_records_and_closes_browser():
    html = page_html(review_html(), review_html(store="Second Shop", label="2 out of 5 stars"))
    playwright, browser, page = _mock_playwright(html)

    with patch("tap_shopify_reviews.scraper.sync_playwright", playwright):
        reviews = _scraper().scrape("https://apps.shopify.com/flow/reviews")

    assert [r.store_name for r in reviews] == ["Acme Goods", "Second Shop"]
    assert [r.rating for r in reviews] == ["4", "2"]
    page.goto.assert_called_once()
    assert page.goto.call_args.kwargs["wait_until"] == "networkidle"
    assert page.evaluate.call_count == 2
    browser.close.assert_called_once()


def test_failed_expand_click_is_skipped():
    good, bad = MagicMock(), MagicMock()
    bad.click.side_effect = PlaywrightError("Element is not attached to the DOM")
    playwright, browser, page = _mock_playwright(page_html(review_html()), [bad, good])

    with patch("tap_shopify_reviews.scraper.sync_playwright", playwright):
        reviews = _scraper().scrape("https://apps.shopify.com/flow/reviews")

    assert len(reviews) == 1
    good.click.assert_called_once()
    browser.close.assert_called_once()


def test_unreadable_page_aborts_and_closes_browser():
    playwright, browser, page = _mock_playwright()
    page.content.side_effect = PlaywrightError("Target page has been closed")

    with patch("tap_shopify_reviews.scraper.sync_playwright", playwright):
        with pytest.raises(ExtractionError):
            _scraper().scrape("https://apps.shopify.com/flow/reviews")

    browser.close.assert_called_once()


def test_navigation_failure_propagates_and_closes_browser():
    playwright, browser, page = _mock_playwright()
    page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")

    with patch("tap_shopify_reviews.scraper.sync_playwright", playwright):
        with pytest.raises(PlaywrightError):
            _scraper().scrape("https://apps.shopify.invalid/flow/reviews")

    browser.close.assert_called_once()
    page.content.assert_not_called()


def test_empty_document_is_an_extraction_error():
    playwright, browser, page = _mock_playwright("")

    with patch("tap_shopify_reviews.scraper.sync_playwright", playwright):
        with pytest.raises(ExtractionError):
            _scraper().scrape("https://apps.shopify.com/flow/reviews")

    browser.close.assert_called_once()
