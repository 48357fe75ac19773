"""TapShopifyReviews - Meltano SDK tap for Shopify App Store reviews."""

from __future__ import annotations

import logging

from singer_sdk import Stream, Tap
from singer_sdk.typing import (
    BooleanType,
    DateTimeType,
    PropertiesList,
    Property,
    StringType,
)

from tap_shopify_reviews.streams import ReviewsStream

logger = logging.getLogger(__name__)


class TapShopifyReviews(Tap):
    """Shopify App Store reviews tap built with the Meltano Singer SDK."""

    name = "tap-shopify-reviews"

    config_jsonschema = PropertiesList(
        Property(
            "url",
            StringType,
            required=True,
            description="Shopify App Store reviews URL, e.g. https://apps.shopify.com/flow/reviews",
        ),
        Property(
            "headless",
            BooleanType,
            default=True,
            description="Run Playwright browser in headless mode.",
        ),
        Property(
            "start_date",
            DateTimeType,
            description="Skip reviews displayed with a date before this one.",
        ),
    ).to_dict()

    def discover_streams(self) -> list[Stream]:
        """Return a list of discovered streams."""
        return [ReviewsStream(tap=self)]


if __name__ == "__main__":
    TapShopifyReviews.cli()
