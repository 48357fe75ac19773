"""Convert a JSON array of flat objects (e.g. a scraper JSON export) to CSV."""

from __future__ import annotations

import os

from tap_shopify_reviews.tabular import serialize
from tap_shopify_reviews.utils import load_json, write_text


def default_csv_path(input_path: str) -> str:
    """``reviews.json`` -> ``reviews.csv`` next to the input file."""
    directory = os.path.dirname(input_path)
    base = os.path.basename(input_path)
    if base.endswith(".json"):
        base = base[: -len(".json")]
    return os.path.join(directory, f"{base}.csv")


def convert_json_file_to_csv(input_path: str, output_path: str | None = None) -> str:
    """
    Read a JSON array from ``input_path`` and write it as CSV.

    Returns the path written. Raises ValidationError when the document is
    not a non-empty array, OSError when either file cannot be accessed and
    json.JSONDecodeError when the input is not JSON.
    """
    records = load_json(input_path)
    csv_content = serialize(records)

    if not output_path:
        output_path = default_csv_path(input_path)

    write_text(csv_content, output_path)
    print(f"Successfully converted {input_path} to {output_path}")
    print(f"Converted {len(records)} records")
    return output_path
