"""Tests for metadata extraction, including the positional country/duration heuristic."""

from __future__ import annotations

from html_fixtures import first_review, review_html
from tap_shopify_reviews.metadata import (
    Confidence,
    PlaceFields,
    PositionalStrategy,
    collapse_whitespace,
    extract_metadata,
)


def test_extracts_all_fields():
    meta = extract_metadata(first_review(review_html()))
    assert meta.store_name == "Acme Goods"
    assert meta.country == "United States"
    assert meta.app_usage_duration == "About 1 year using the app"
    assert meta.date == "September 18, 2025"
    assert meta.content == "Great app, works as advertised."
    assert meta.confidence is Confidence.DEGRADED


def test_single_qualifying_child_sets_country_only():
    meta = extract_metadata(first_review(review_html(meta=("Germany",))))
    assert meta.country == "Germany"
    assert meta.app_usage_duration == ""


def test_empty_children_are_skipped():
    meta = extract_metadata(first_review(review_html(meta=("   ", "France", "1 day using the app"))))
    assert meta.country == "France"
    assert meta.app_usage_duration == "1 day using the app"


def test_child_repeating_store_name_is_skipped():
    meta = extract_metadata(first_review(review_html(meta=("Acme Goods", "Spain"))))
    assert meta.country == "Spain"


def test_whitespace_is_collapsed():
    meta = extract_metadata(first_review(review_html(meta=("New\n   Zealand",))))
    assert meta.country == "New Zealand"


def test_missing_elements_give_empty_strings():
    markup = """
    <div data-merchant-review="">
      <span>nothing useful here</span>
    </div>
    """
    meta = extract_metadata(first_review(markup))
    assert meta.store_name == ""
    assert meta.country == ""
    assert meta.app_usage_duration == ""
    assert meta.date == ""
    assert meta.content == ""
    assert meta.confidence is Confidence.NONE


def test_non_div_children_are_ignored():
    markup = review_html(meta=("Italy",)).replace(
        "<div>\n      Italy", "<span>Badge</span><div>\n      Italy"
    )
    meta = extract_metadata(first_review(markup))
    assert meta.country == "Italy"


class _LabeledStub:
    confidence = Confidence.LABELED

    def extract(self, node, store_name, selectors):
        return PlaceFields("Labeled Land", "Forever", Confidence.LABELED)


class _NoAnswer:
    def extract(self, node, store_name, selectors):
        return None


def test_first_answering_strategy_wins():
    node = first_review(review_html())
    meta = extract_metadata(node, strategies=(_NoAnswer(), _LabeledStub(), PositionalStrategy()))
    assert meta.country == "Labeled Land"
    assert meta.confidence is Confidence.LABELED


def test_no_strategy_answers():
    meta = extract_metadata(first_review(review_html()), strategies=(_NoAnswer(),))
    assert (meta.country, meta.app_usage_duration) == ("", "")
    assert meta.confidence is Confidence.NONE


def test_collapse_whitespace():
    assert collapse_whitespace("  a \n\t b  ") == "a b"
