# books/utils/editor_text.py
"""Plain-text form of an AddBookModel that the user can edit.

Every field is written on its own ``Key: value`` line. Optional fields are
written with an empty value rather than left out, so that the text can always
be parsed back. Parsing is keyed, not positional; lines may come in any order.
"""

import math
import os
from typing import Any, Callable, Dict, Optional

from ..errors import ParseError
from ..models.book import AddBookModel

# (label, field) in render order
FIELDS = [
    ("Author(s)", "authors"),
    ("Publisher", "publisher"),
    ("Title", "title"),
    ("Edition", "edition"),
    ("Date Published", "date_published"),
    ("Original Date Published", "original_date_published"),
    ("Price", "price"),
    ("Binding", "binding"),
    ("ISBN", "isbn"),
    ("Pages", "pages"),
    ("Owned", "owned"),
]

LABEL_TO_FIELD = dict(FIELDS)

OPTIONAL_FIELDS = {"original_date_published", "price"}

REQUIRED_FIELDS = [field for _, field in FIELDS if field not in OPTIONAL_FIELDS]


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_editable(model: AddBookModel, newline: Optional[str] = None) -> str:
    """Render the model as the 11-line editable block"""
    newline = newline or os.linesep
    return newline.join(
        f"{label}: {_format_value(getattr(model, field))}" for label, field in FIELDS
    )


def _parse_optional_text(value: str) -> Optional[str]:
    return value or None


def _parse_price(value: str) -> Optional[float]:
    if not value:
        return None
    try:
        price = float(value)
    except ValueError:
        raise ParseError("price", f"Could not parse price field: '{value}'")
    # SQLite stores NaN as NULL
    if not math.isfinite(price):
        raise ParseError("price", f"Price must be a finite number: '{value}'")
    return price


def _parse_pages(value: str) -> int:
    try:
        pages = int(value)
    except ValueError:
        raise ParseError("pages", f"Could not parse pages field: '{value}'")
    if pages < 0:
        raise ParseError("pages", f"Pages cannot be negative: '{value}'")
    return pages


def _parse_owned(value: str) -> bool:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ParseError("owned", f"Could not parse owned field: '{value}' (expected true or false)")


VALUE_PARSERS: Dict[str, Callable[[str], Any]] = {
    "original_date_published": _parse_optional_text,
    "price": _parse_price,
    "pages": _parse_pages,
    "owned": _parse_owned,
}


def parse_editable(text: str) -> AddBookModel:
    """Parse an edited block back into an AddBookModel.

    Raises:
        ParseError: on an unknown, repeated or missing required key, or a value that
            does not fit its field. ``error.field`` names the culprit.
    """
    values: Dict[str, Any] = {}

    # Only \n and \r\n end a line; other separators may appear inside values
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip():
            continue

        label, _, raw_value = line.partition(":")
        field = LABEL_TO_FIELD.get(label)
        if field is None:
            raise ParseError(label, f"Unknown field '{label}'")
        if field in values:
            raise ParseError(field, f"Duplicate field '{label}'")

        value = raw_value.strip(" \t")
        parser = VALUE_PARSERS.get(field)
        values[field] = parser(value) if parser else value

    for field in REQUIRED_FIELDS:
        if field not in values:
            raise ParseError(field, f"Missing {field}")

    return AddBookModel(**values)
