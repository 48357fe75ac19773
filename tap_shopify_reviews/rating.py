"""Star rating resolution for a single review node."""

from __future__ import annotations

import logging
import re

from tap_shopify_reviews.config import DEFAULT_SELECTORS, Selectors
from tap_shopify_reviews.nodes import ReviewNode

logger = logging.getLogger(__name__)

_RATING_LABEL = re.compile(r"(\d+)\s+out of \d+ stars")


def rating_from_label(label: str | None) -> str:
    """Return the leading star count of a label like "4 out of 5 stars", or ""."""
    if not label:
        return ""
    match = _RATING_LABEL.search(label)
    return match.group(1) if match else ""


def count_filled_stars(node: ReviewNode, selectors: Selectors = DEFAULT_SELECTORS) -> str:
    """Count filled star icons inside the star row, or "" if there is no star row.

    Only the star row is searched; other filled icons in the review (badges,
    avatars) would otherwise inflate the count.
    """
    container = node.query_selector(selectors.rating_container)
    if container is None:
        return ""
    return str(len(container.query_selector_all(selectors.filled_star)))


def resolve_rating(node: ReviewNode, selectors: Selectors = DEFAULT_SELECTORS) -> str:
    """
    Resolve the 0-5 star rating of a review as a string.

    The accessible label ("4 out of 5 stars") is authoritative. When it is
    missing or does not parse, the filled stars in the star row are counted
    instead. Returns "" when neither source is present; never raises.
    """
    labelled = node.query_selector(selectors.rating_label)
    if labelled is not None:
        rating = rating_from_label(labelled.get_attribute("aria-label"))
        if rating:
            return rating
        logger.debug("Unparseable rating label, counting stars instead")

    return count_filled_stars(node, selectors)
