"""
Array-of-records to CSV text.

Design decisions:
- Output is built as a string, not through the csv module, because the
  exact text matters: rows are joined with a bare "\\n", there is no
  trailing newline, a lone "\\r" does not trigger quoting and an empty
  single-column row stays empty instead of becoming ``""``.
- Headers come from the first record only. Keys that appear in later
  records but not in the first are ignored.
- Missing and falsy values (None, "", 0, False) all render as an empty
  cell. Downstream consumers cannot tell a real zero from a missing one.
- Quoting is a per-column policy so the fixed-column review export and the
  generic JSON converter share one escaping implementation.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from tap_shopify_reviews.errors import ValidationError

DELIMITER = ","
QUOTE = '"'
LINE_SEPARATOR = "\n"

_NEEDS_QUOTING = (DELIMITER, QUOTE, "\n")


class Quoting(str, enum.Enum):
    MINIMAL = "minimal"  # quote only fields containing a comma, quote or newline
    ALL = "all"


@dataclass(frozen=True)
class Column:
    header: str
    key: str
    quoting: Quoting = Quoting.MINIMAL


def stringify(value: Any) -> str:
    """Render a cell value the way it reads in the source JSON."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, float) and value.is_integer():
        # JSON has one number type: 1.0 reads back as 1.
        return str(int(value))
    return str(value)


def escape_field(value: Any, quoting: Quoting = Quoting.MINIMAL) -> str:
    text = stringify(value)
    if quoting is Quoting.ALL or any(ch in text for ch in _NEEDS_QUOTING):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def columns_from(record: Mapping[str, Any], quoting: Quoting = Quoting.MINIMAL) -> list[Column]:
    """One column per key of ``record``, in key order, headed by the key itself."""
    return [Column(header=str(key), key=key, quoting=quoting) for key in record]


def _validate(records: Any) -> None:
    if not isinstance(records, (list, tuple)) or len(records) == 0:
        raise ValidationError("Input must be a non-empty array of objects")
    if not isinstance(records[0], Mapping):
        raise ValidationError("Input must be a non-empty array of objects")


def _cell(record: Any, key: str) -> Any:
    if not isinstance(record, Mapping):
        return ""
    return record.get(key) or ""


def serialize(
    records: Sequence[Mapping[str, Any]],
    columns: Sequence[Column] | None = None,
    quoting: Quoting = Quoting.MINIMAL,
) -> str:
    """
    Convert a list of flat records to CSV text.

    Args:
        records: Non-empty list of mappings. The first record defines the
            header row unless ``columns`` is given.
        columns: Explicit headers, lookup keys and per-column quoting.
        quoting: Policy for the columns derived from the first record.

    Returns:
        Header line plus one line per record, joined by "\\n", with no
        trailing newline.

    Raises:
        ValidationError: ``records`` is not a non-empty list of mappings.
    """
    _validate(records)
    if columns is None:
        columns = columns_from(records[0], quoting)

    lines = [DELIMITER.join(escape_field(col.header) for col in columns)]
    for record in records:
        lines.append(
            DELIMITER.join(escape_field(_cell(record, col.key), col.quoting) for col in columns)
        )
    return LINE_SEPARATOR.join(lines)
