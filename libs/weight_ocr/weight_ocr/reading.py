# weight_ocr/libs/weight_ocr/weight_ocr/reading.py
from __future__ import annotations
import re

from .models import WeightReading

MAX_DIGITS = 4

# first ASCII number, optionally followed by a unit token
_READING_RE = re.compile(r"(\d+\.?\d*)\s*(lb|kg|oz|jin|g|l|b|k|j|i|n)?", re.IGNORECASE | re.ASCII)

# canonical units plus the single letters OCR tends to leave of them
UNIT_ALIASES = {
    "lb": "lb",
    "kg": "kg",
    "oz": "oz",
    "jin": "jin",
    "g": "g",
    "l": "lb",
    "b": "lb",
    "k": "kg",
    "j": "jin",
    "i": "jin",
    "n": "jin",
}


def clip_digits(raw: str, max_digits: int = MAX_DIGITS) -> str:
    """
    Keep at most max_digits digits of a number.

    '123456' -> '1234', '12.3456' -> '12.34', '12345.6' -> '1234'
    """
    digits = raw.replace(".", "", 1)
    if len(digits) <= max_digits:
        return raw
    kept = digits[:max_digits]
    dot = raw.find(".")
    if dot == -1 or dot >= max_digits:
        return kept
    return f"{kept[:dot]}.{kept[dot:]}"


def normalize_unit(token: str | None) -> str:
    token = (token or "").lower()
    return UNIT_ALIASES.get(token, token)


def parse_weight(text: str) -> WeightReading:
    """
    Pull the first number and its unit out of OCR text.

    Unit is "" when the number has no unit token; both fields are None when
    the text has no digits at all.
    """
    m = _READING_RE.search(text)
    if m is None:
        return WeightReading()
    return WeightReading(value=clip_digits(m.group(1)), unit=normalize_unit(m.group(2)))
