"""Stream definitions for tap-shopify-reviews."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable

from dateutil import parser as date_parser
from singer_sdk.streams import Stream

from tap_shopify_reviews.schema import REVIEWS_SCHEMA
from tap_shopify_reviews.scraper import ShopifyReviewsScraper

logger = logging.getLogger(__name__)


def parse_review_date(text: str) -> date | None:
    """Parse a displayed review date such as "September 18, 2025"; None if unparseable."""
    if not text:
        return None
    try:
        return date_parser.parse(text, fuzzy=True).date()
    except (ValueError, OverflowError):
        return None


def filter_since(
    records: Iterable[dict[str, str]], start: date, log: logging.Logger = logger
) -> list[dict[str, str]]:
    """Drop records dated before ``start``; records without a readable date are kept."""
    kept = []
    for record in records:
        review_date = parse_review_date(record.get("date", ""))
        if review_date is None:
            log.warning("Could not parse review date: %r", record.get("date"))
            kept.append(record)
        elif review_date >= start:
            kept.append(record)
    return kept


class ReviewsStream(Stream):
    """Stream for Shopify App Store reviews."""

    name = "reviews"
    # Shopify does not expose a review identifier in the page.
    primary_keys: list[str] = []
    replication_key = None
    schema = REVIEWS_SCHEMA

    def get_records(self, context: dict | None) -> Iterable[dict[str, Any]]:
        """Scrape the configured page and yield one record per review."""
        scraper = ShopifyReviewsScraper(headless=self.config.get("headless", True))
        records = [review.to_dict() for review in scraper.scrape(self.config["url"])]

        start_date = self.config.get("start_date")
        if start_date:
            start = start_date if isinstance(start_date, datetime) else date_parser.isoparse(start_date)
            records = filter_since(records, start.date(), self.logger)
            self.logger.info("Reviews on or after %s: %d", start.date(), len(records))

        self.logger.info("Emitting %d review records", len(records))
        yield from records
