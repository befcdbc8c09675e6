"""Line-oriented product records.

A "record" is a single line with a tiny schema:
    <id>,<name>,<price>

Example:
    1,Product 1,100

Design notes:
- No quoting or escaping: a comma or newline inside a field corrupts the
  record boundary for every later read.
- Fields stay raw text after parsing; nothing is coerced.
"""

from __future__ import annotations
import math
from typing import NamedTuple, Union

Key = Union[str, int, float]

FIELD_SEP = ","
LINE_SEP = "\n"


class Record(NamedTuple):
    id: str
    name: str
    price: str


def parse_line(line: str) -> Record:
    """Parse one line into a Record.

    Missing trailing fields become "" and anything past the third is dropped.
    """
    parts = line.split(FIELD_SEP)
    parts += [""] * (3 - len(parts))
    return Record(parts[0], parts[1], parts[2])


def key_of(line: str) -> str:
    """Return the first comma-delimited field of a line."""
    return line.split(FIELD_SEP, 1)[0]


def format_value(value: object) -> str:
    """Render one field; integral floats lose their ".0"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_record(rec_id: Key, name: object, price: object) -> str:
    """Render a record back to its line form (no terminator)."""
    return FIELD_SEP.join(format_value(v) for v in (rec_id, name, price))


_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def _to_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if "_" in text:
        return math.nan

    base = _RADIX_PREFIXES.get(text[:2].lower())
    if base is not None:
        digits = text[2:]
        # int() would also accept a sign or inner whitespace here
        if not digits or digits[0] in "+-" or digits != digits.strip():
            return math.nan
        try:
            return float(int(digits, base))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    # float() also accepts "inf"/"nan" spellings; only "Infinity" is numeric
    word = text.lstrip("+-")
    if word[:3].lower() in ("inf", "nan") and word != "Infinity":
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def loose_equals(field: str, key: Key) -> bool:
    """Compare a raw field with a lookup key, coercing for numeric keys.

    "1" matches both "1" and 1; an empty field matches 0.
    """
    if isinstance(key, str):
        return field == key
    if isinstance(key, bool):
        key = int(key)
    return _to_number(field) == key


def strict_equals(field: str, key: Key) -> bool:
    """Exact comparison: only a str key with identical text matches."""
    return isinstance(key, str) and field == key
