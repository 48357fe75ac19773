"""Tests for star rating resolution."""

from __future__ import annotations

import pytest

from html_fixtures import first_review, review_html
from tap_shopify_reviews.rating import count_filled_stars, rating_from_label, resolve_rating


def test_rating_from_accessible_label():
    node = first_review(review_html(label="4 out of 5 stars", filled=1))
    # The label wins over the star count.
    assert resolve_rating(node) == "4"


def test_rating_falls_back_to_filled_star_count():
    node = first_review(review_html(label=None, filled=3))
    assert resolve_rating(node) == "3"


def test_unparseable_label_falls_back_to_star_count():
    node = first_review(review_html(label="Rated out of 5 stars", filled=2))
    assert resolve_rating(node) == "2"


def test_zero_filled_stars():
    node = first_review(review_html(label=None, filled=0))
    assert resolve_rating(node) == "0"


def test_no_label_and_no_star_row_returns_empty():
    node = first_review(review_html(star_row=False))
    assert resolve_rating(node) == ""


def test_filled_icons_outside_star_row_are_ignored():
    markup = review_html(label=None, filled=1).replace(
        '<div class="tw-text-body-xs',
        '<svg class="tw-fill-fg-primary"></svg><div class="tw-text-body-xs',
    )
    assert count_filled_stars(first_review(markup)) == "1"


@pytest.mark.parametrize(
    "label, expected",
    [
        ("5 out of 5 stars", "5"),
        ("1  out of 5 stars", "1"),
        ("Rating: 3 out of 5 stars", "3"),
        ("out of 5 stars", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_rating_from_label(label, expected):
    assert rating_from_label(label) == expected
