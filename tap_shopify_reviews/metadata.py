"""
Metadata extraction for a single review node.

Store name, date and body text sit in elements with recognisable class
combinations. Country and app usage duration do not: Shopify renders
them as unlabelled sibling ``div``s under the store name. They are
filled by a chain of field strategies. The only strategy available
today reads them by position and is marked DEGRADED, so a label-based
strategy can be put in front of it without touching any caller.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Protocol, Sequence

from tap_shopify_reviews.config import DEFAULT_SELECTORS, Selectors
from tap_shopify_reviews.nodes import ReviewNode

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class Confidence(str, enum.Enum):
    LABELED = "labeled"
    DEGRADED = "degraded"
    NONE = "none"


@dataclass(frozen=True)
class PlaceFields:
    """Country / usage duration pair produced by a field strategy."""

    country: str = ""
    app_usage_duration: str = ""
    confidence: Confidence = Confidence.NONE


@dataclass(frozen=True)
class Metadata:
    store_name: str = ""
    country: str = ""
    app_usage_duration: str = ""
    date: str = ""
    content: str = ""
    confidence: Confidence = Confidence.NONE


class FieldStrategy(Protocol):
    """Resolves country and usage duration; returns None to defer to the next strategy."""

    def extract(
        self, node: ReviewNode, store_name: str, selectors: Selectors
    ) -> PlaceFields | None:
        ...


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _trimmed_text(node: ReviewNode, selector: str) -> str:
    found = node.query_selector(selector)
    if found is None:
        return ""
    return found.text_content().strip()


class PositionalStrategy:
    """Reads country and usage duration by their order under the metadata container.

    The container's direct ``div`` children are, in visual order, the store
    name, the country and the usage duration. Children whose text is empty
    or equals the store name are skipped; the first survivor is the country,
    the second the usage duration. A reordered layout silently swaps the
    fields, hence DEGRADED confidence.
    """

    confidence = Confidence.DEGRADED

    def extract(
        self, node: ReviewNode, store_name: str, selectors: Selectors
    ) -> PlaceFields | None:
        container = node.query_selector(selectors.metadata_container)
        if container is None:
            return None

        texts = []
        for child in container.children():
            raw = child.text_content()
            if child.tag_name() != "div" or raw.strip() == store_name:
                continue
            text = collapse_whitespace(raw)
            if text and text != store_name:
                texts.append(text)

        return PlaceFields(
            country=texts[0] if len(texts) >= 1 else "",
            app_usage_duration=texts[1] if len(texts) >= 2 else "",
            confidence=self.confidence,
        )


DEFAULT_STRATEGIES: tuple[FieldStrategy, ...] = (PositionalStrategy(),)


def extract_place_fields(
    node: ReviewNode,
    store_name: str,
    selectors: Selectors = DEFAULT_SELECTORS,
    strategies: Sequence[FieldStrategy] = DEFAULT_STRATEGIES,
) -> PlaceFields:
    """Run the field strategies in order and return the first answer."""
    for strategy in strategies:
        fields = strategy.extract(node, store_name, selectors)
        if fields is not None:
            return fields
    return PlaceFields()


def extract_metadata(
    node: ReviewNode,
    selectors: Selectors = DEFAULT_SELECTORS,
    strategies: Sequence[FieldStrategy] = DEFAULT_STRATEGIES,
) -> Metadata:
    """Pull store name, country, usage duration, date and body text from a review."""
    store_name = _trimmed_text(node, selectors.store_name)
    place = extract_place_fields(node, store_name, selectors, strategies)
    if place.confidence is Confidence.DEGRADED:
        logger.debug(
            "Positional metadata for %r: country=%r usage=%r",
            store_name, place.country, place.app_usage_duration,
        )

    return Metadata(
        store_name=store_name,
        country=place.country,
        app_usage_duration=place.app_usage_duration,
        date=_trimmed_text(node, selectors.date),
        content=_trimmed_text(node, selectors.content),
        confidence=place.confidence,
    )
