"""Playwright-based Shopify App Store reviews scraper."""

from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from tap_shopify_reviews import config
from tap_shopify_reviews.config import DEFAULT_SELECTORS, Selectors
from tap_shopify_reviews.errors import ExtractionError
from tap_shopify_reviews.nodes import parse_review_nodes
from tap_shopify_reviews.record import ReviewRecord, extract_reviews

logger = logging.getLogger(__name__)


def extract_reviews_from_html(
    page_html: str, selectors: Selectors = DEFAULT_SELECTORS
) -> list[ReviewRecord]:
    """Extract every review of a serialized reviews page, in document order."""
    nodes = parse_review_nodes(page_html, selectors.review)
    return extract_reviews(nodes, selectors)


class ShopifyReviewsScraper:
    """Scrapes one Shopify App Store reviews page using Playwright."""

    def __init__(
        self,
        headless: bool = config.HEADLESS,
        selectors: Selectors = DEFAULT_SELECTORS,
        initial_wait_ms: int = config.INITIAL_WAIT_MS,
        scroll_wait_ms: int = config.SCROLL_WAIT_MS,
        expand_wait_ms: int = config.EXPAND_WAIT_MS,
        navigation_timeout_ms: int = config.NAVIGATION_TIMEOUT_MS,
    ) -> None:
        self.headless = headless
        self.selectors = selectors
        self.initial_wait_ms = int(initial_wait_ms)
        self.scroll_wait_ms = int(scroll_wait_ms)
        self.expand_wait_ms = int(expand_wait_ms)
        self.navigation_timeout_ms = int(navigation_timeout_ms)

    def scrape(self, url: str) -> list[ReviewRecord]:
        """Run the full scraping pipeline. Returns review records in page order."""
        logger.info("Scraping reviews from: %s", url)
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=self.headless)
            try:
                page = browser.new_page()
                self._navigate(page, url)
                self._scroll_all_reviews(page)
                self._expand_all_reviews(page)
                reviews = self._extract_reviews(page)
                logger.info("Extracted %d reviews", len(reviews))
                return reviews
            finally:
                browser.close()

    def _navigate(self, page: Page, url: str) -> None:
        page.goto(url, wait_until="networkidle", timeout=self.navigation_timeout_ms)
        # Reviews render client-side after the network settles.
        page.wait_for_timeout(self.initial_wait_ms)

    def _scroll_all_reviews(self, page: Page) -> None:
        """Scroll halfway, then to the bottom, to trigger lazy loading."""
        page.evaluate("() => window.scrollTo(0, document.body.scrollHeight / 2)")
        page.wait_for_timeout(self.scroll_wait_ms)
        page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")
        page.wait_for_timeout(self.scroll_wait_ms)

    def _expand_all_reviews(self, page: Page) -> None:
        """Click every "show more" button so review bodies are complete."""
        buttons = page.query_selector_all(self.selectors.show_more_button)
        logger.info('Found %d "show more" buttons', len(buttons))
        for i, button in enumerate(buttons):
            try:
                button.click()
                page.wait_for_timeout(self.expand_wait_ms)
            except PlaywrightError as exc:
                # The truncated text is still on the page; keep going.
                logger.warning("Could not click show more button %d: %s", i, exc)

    def _extract_reviews(self, page: Page) -> list[ReviewRecord]:
        try:
            page_html = page.content()
        except PlaywrightError as exc:
            raise ExtractionError(f"Could not read the rendered page: {exc}") from exc
        return extract_reviews_from_html(page_html, self.selectors)
