"""Review records and their assembly from extracted fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from tap_shopify_reviews.config import DEFAULT_SELECTORS, Selectors
from tap_shopify_reviews.metadata import Metadata, extract_metadata
from tap_shopify_reviews.nodes import ReviewNode
from tap_shopify_reviews.rating import resolve_rating

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewRecord:
    """One scraped review. Every field is a string; missing values are ""."""

    rating: str = ""
    store_name: str = ""
    country: str = ""
    app_usage_duration: str = ""
    date: str = ""
    content: str = ""
    # Shopify does not expose helpful votes in the review markup.
    helpful: str = ""

    def to_dict(self) -> dict[str, str]:
        """Wire form, keyed the way the JSON output and the Singer stream expect."""
        return {
            "rating": self.rating,
            "storeName": self.store_name,
            "country": self.country,
            "appUsageDuration": self.app_usage_duration,
            "date": self.date,
            "content": self.content,
            "helpful": self.helpful,
        }


def to_text(value: Any) -> str:
    """Coerce any extracted value to a string; None becomes ""."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def assemble_record(rating: Any, metadata: Metadata) -> ReviewRecord:
    return ReviewRecord(
        rating=to_text(rating),
        store_name=to_text(metadata.store_name),
        country=to_text(metadata.country),
        app_usage_duration=to_text(metadata.app_usage_duration),
        date=to_text(metadata.date),
        content=to_text(metadata.content),
        helpful="",
    )


def extract_record(node: ReviewNode, selectors: Selectors = DEFAULT_SELECTORS) -> ReviewRecord:
    """Resolve rating and metadata for one review node and assemble the record."""
    return assemble_record(
        resolve_rating(node, selectors),
        extract_metadata(node, selectors),
    )


def extract_reviews(
    nodes: Iterable[ReviewNode], selectors: Selectors = DEFAULT_SELECTORS
) -> list[ReviewRecord]:
    """Build one record per node, keeping document order."""
    reviews = []
    for i, node in enumerate(nodes):
        logger.debug("Processing review %d", i + 1)
        reviews.append(extract_record(node, selectors))
    return reviews
