"""Review nodes: the read-only element interface the extractors work against.

The extractors never talk to the browser directly. The scraper serializes
the rendered DOM once, after all lazy loading and expanding is done, and
the resulting document is parsed with lxml. Anything that offers the
``ReviewNode`` methods can be fed to the extractors, which keeps them
testable against plain HTML strings.
"""

from __future__ import annotations

import logging
from typing import Protocol

from lxml import etree, html

from tap_shopify_reviews.errors import ExtractionError

logger = logging.getLogger(__name__)


class ReviewNode(Protocol):
    """Protocol for the subtree of one review in the rendered document."""

    def query_selector(self, selector: str) -> ReviewNode | None:
        """Return the first descendant matching a CSS selector, or None."""
        ...

    def query_selector_all(self, selector: str) -> list[ReviewNode]:
        """Return every descendant matching a CSS selector, in document order."""
        ...

    def get_attribute(self, name: str) -> str | None:
        ...

    def text_content(self) -> str:
        """Text of the element and all of its descendants, untrimmed."""
        ...

    def children(self) -> list[ReviewNode]:
        """Direct element children (comments and text are skipped)."""
        ...

    def tag_name(self) -> str:
        """Lower-case tag name, e.g. ``"div"``."""
        ...


class LxmlNode:
    """ReviewNode backed by an ``lxml.html`` element.

    CSS queries go through lxml's ``cssselect`` integration.
    """

    def __init__(self, element: html.HtmlElement):
        self._element = element

    def query_selector(self, selector: str) -> LxmlNode | None:
        matches = self._element.cssselect(selector)
        return LxmlNode(matches[0]) if matches else None

    def query_selector_all(self, selector: str) -> list[LxmlNode]:
        return [LxmlNode(el) for el in self._element.cssselect(selector)]

    def get_attribute(self, name: str) -> str | None:
        return self._element.get(name)

    def text_content(self) -> str:
        return self._element.text_content() or ""

    def children(self) -> list[LxmlNode]:
        # Comments and processing instructions have a non-string tag.
        return [LxmlNode(child) for child in self._element if isinstance(child.tag, str)]

    def tag_name(self) -> str:
        return self._element.tag.lower()

    def __repr__(self) -> str:
        return f"<LxmlNode {self.tag_name()}>"


def parse_document(page_html: str) -> LxmlNode:
    """Parse a serialized page into the root node.

    Raises:
        ExtractionError: the document is empty or cannot be parsed.
    """
    try:
        root = html.fromstring(page_html)
    except (etree.ParserError, ValueError) as exc:
        raise ExtractionError(f"Could not parse page HTML: {exc}") from exc
    return LxmlNode(root)


def parse_review_nodes(page_html: str, selector: str) -> list[LxmlNode]:
    """Return the review nodes of a serialized page in document order."""
    root = parse_document(page_html)
    nodes = root.query_selector_all(selector)
    logger.info("Found %d review elements", len(nodes))
    return nodes
