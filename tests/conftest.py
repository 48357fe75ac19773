"""Shared fixtures."""

from __future__ import annotations

import pytest

from html_fixtures import page_html, review_html


@pytest.fixture
def review_page() -> str:
    """A page with three reviews in a known order."""
    return page_html(
        review_html(),
        review_html(
            store="Blue Fox Apparel",
            meta=("Canada", "2 months using the app"),
            label="5 out of 5 stars",
            filled=5,
            date="August 2, 2025",
            content='He said "hi", then\nleft.',
        ),
        review_html(
            store="Corner Shop",
            meta=("Germany",),
            label=None,
            filled=2,
            date="July 30, 2025",
            content="Support was slow.",
        ),
    )
