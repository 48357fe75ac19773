"""
Central configuration for the Shopify review scraper.

Selectors, page timings and output defaults live here so that adapting
to a markup or pacing change means editing one file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Browser session
# ---------------------------------------------------------------------------
HEADLESS = _env_bool("SHOPIFY_REVIEWS_HEADLESS", True)
NAVIGATION_TIMEOUT_MS = int(os.getenv("SHOPIFY_REVIEWS_NAV_TIMEOUT_MS", "60000"))

# The reviews list is rendered client-side and lazy-loads on scroll, so
# the page gets an initial settle wait plus one wait per scroll step.
INITIAL_WAIT_MS = int(os.getenv("SHOPIFY_REVIEWS_INITIAL_WAIT_MS", "3000"))
SCROLL_WAIT_MS = int(os.getenv("SHOPIFY_REVIEWS_SCROLL_WAIT_MS", "2000"))
EXPAND_WAIT_MS = int(os.getenv("SHOPIFY_REVIEWS_EXPAND_WAIT_MS", "500"))

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
OUTPUT_DIR = os.getenv("SHOPIFY_REVIEWS_OUTPUT_DIR", os.getcwd())
FILE_PREFIX = "shopify-reviews"
LOG_LEVEL = os.getenv("SHOPIFY_REVIEWS_LOG_LEVEL", "INFO")


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------
# Shopify's app store uses Tailwind utility classes with a ``tw-`` prefix.
# None of these carry semantic meaning, which is why most fields below are
# located by class combination and, for country / usage duration, by
# position only.
@dataclass(frozen=True)
class Selectors:
    review: str = "[data-merchant-review]"
    show_more_button: str = '[data-testid="review-item-show-more-button"]'
    rating_label: str = '[aria-label*="out of 5 stars"]'
    rating_container: str = r".tw-flex.tw-relative.tw-space-x-0\.5"
    filled_star: str = ".tw-fill-fg-primary"
    content: str = "p.tw-break-words"
    store_name: str = ".tw-text-heading-xs.tw-text-fg-primary"
    date: str = ".tw-text-body-xs.tw-text-fg-tertiary"
    metadata_container: str = r".tw-order-2.lg\:tw-order-1"


DEFAULT_SELECTORS = Selectors()
