"""Rendering scraped reviews as CSV or JSON, and naming the output file."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Sequence

from tap_shopify_reviews import config
from tap_shopify_reviews.errors import ValidationError
from tap_shopify_reviews.record import ReviewRecord
from tap_shopify_reviews.tabular import Column, Quoting, serialize

logger = logging.getLogger(__name__)

FORMATS = ("csv", "json")

# Every text column is quoted unconditionally so spreadsheet tools never
# split review bodies; the rating is a bare digit.
REVIEW_COLUMNS = (
    Column("Rating", "rating", Quoting.MINIMAL),
    Column("Store Name", "storeName", Quoting.ALL),
    Column("Country", "country", Quoting.ALL),
    Column("App Usage Duration", "appUsageDuration", Quoting.ALL),
    Column("Date", "date", Quoting.ALL),
    Column("Content", "content", Quoting.ALL),
)


def normalize_format(fmt: str) -> str:
    """Lower-case ``fmt`` and check it is a supported output format."""
    normalized = (fmt or "").strip().lower()
    if normalized not in FORMATS:
        raise ValidationError('Output format must be either "csv" or "json"')
    return normalized


def render_csv(reviews: Sequence[ReviewRecord]) -> str:
    if not reviews:
        return ",".join(col.header for col in REVIEW_COLUMNS)
    return serialize([r.to_dict() for r in reviews], columns=REVIEW_COLUMNS)


def render_json(reviews: Sequence[ReviewRecord]) -> str:
    return json.dumps([r.to_dict() for r in reviews], ensure_ascii=False, indent=2)


def render(reviews: Sequence[ReviewRecord], fmt: str = "csv") -> str:
    """Render reviews in the requested format ("csv" or "json")."""
    fmt = normalize_format(fmt)
    if fmt == "json":
        return render_json(reviews)
    return render_csv(reviews)


def generate_file_name(fmt: str = "csv", now: datetime | None = None) -> str:
    """Return ``shopify-reviews-<YYYY-MM-DD>-<epoch ms>.<fmt>`` for the current UTC time."""
    fmt = normalize_format(fmt)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    date_string = now.astimezone(timezone.utc).date().isoformat()
    timestamp = int(now.timestamp() * 1000)
    return f"{config.FILE_PREFIX}-{date_string}-{timestamp}.{fmt}"
