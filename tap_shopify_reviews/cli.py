"""
Command-line entrypoints.

Usage:
    shopify-reviews "https://apps.shopify.com/flow/reviews?ratings[]=4"
    shopify-reviews "https://apps.shopify.com/flow/reviews?ratings[]=4" json
    shopify-reviews saved-page.html --from-html -o reviews.csv
    json-to-csv shopify-reviews-2025-09-20-123456.json
    json-to-csv input.json output.csv

Both commands exit 0 on success and 1 on any handled failure; a missing
required argument exits through argparse with its usage text on stderr.
"""

from __future__ import annotations

import argparse
import os
import sys

from playwright.sync_api import Error as PlaywrightError

from tap_shopify_reviews import config
from tap_shopify_reviews.convert import convert_json_file_to_csv
from tap_shopify_reviews.errors import ScraperError, ValidationError
from tap_shopify_reviews.output import generate_file_name, normalize_format, render
from tap_shopify_reviews.scraper import ShopifyReviewsScraper, extract_reviews_from_html
from tap_shopify_reviews.utils import read_text, setup_logging, write_text

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL.upper(),
        choices=LOG_LEVELS,
    )


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def build_scrape_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shopify-reviews",
        description="Scrape reviews from a Shopify App Store reviews page.",
        epilog='Example: shopify-reviews "https://apps.shopify.com/flow/reviews?ratings[]=4" json',
    )
    parser.add_argument("url", help="Shopify app review URL (or a saved page with --from-html)")
    parser.add_argument(
        "format",
        nargs="?",
        default="csv",
        help="Output format, csv or json (default: %(default)s)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output file path (default: generated name in %s)" % config.OUTPUT_DIR,
    )
    parser.add_argument(
        "--from-html",
        action="store_true",
        help="Treat URL as the path of a saved reviews page; no browser is launched",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window instead of running headless",
    )
    _add_log_level(parser)
    return parser


def scrape_main(argv: list[str] | None = None) -> int:
    args = build_scrape_parser().parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        fmt = normalize_format(args.format)
    except ValidationError as exc:
        return _error(str(exc))

    try:
        if args.from_html:
            if not os.path.exists(args.url):
                return _error(f"Input file '{args.url}' not found")
            reviews = extract_reviews_from_html(read_text(args.url))
        else:
            scraper = ShopifyReviewsScraper(headless=config.HEADLESS and not args.headed)
            reviews = scraper.scrape(args.url)
    except (ScraperError, PlaywrightError, OSError) as exc:
        print(f"Error scraping reviews: {exc}", file=sys.stderr)
        return 1

    if not reviews:
        logger.warning(
            "No reviews found. The page structure might have changed or no reviews exist."
        )
        return 0

    output_path = args.output or os.path.join(config.OUTPUT_DIR, generate_file_name(fmt))
    try:
        write_text(render(reviews, fmt), output_path)
    except OSError as exc:
        return _error(f"Could not write {output_path}: {exc}")

    print(f"Successfully scraped {len(reviews)} reviews")
    print(f"Output saved to: {output_path} ({fmt.upper()} format)")
    return 0


def build_convert_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-to-csv",
        description="Convert a JSON array of flat objects to CSV.",
    )
    parser.add_argument("input", help="Input JSON file")
    parser.add_argument(
        "output",
        nargs="?",
        help="Output CSV file (default: input name with a .csv extension)",
    )
    _add_log_level(parser)
    return parser


def convert_main(argv: list[str] | None = None) -> int:
    args = build_convert_parser().parse_args(argv)
    setup_logging(args.log_level)

    if not os.path.exists(args.input):
        return _error(f"Input file '{args.input}' not found")

    try:
        convert_json_file_to_csv(args.input, args.output)
    except (ValueError, OSError) as exc:
        # ValueError covers both ValidationError and json.JSONDecodeError.
        print(f"Error converting JSON to CSV: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(scrape_main())
