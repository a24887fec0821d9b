"""VML fractions: 0.0 to 1.0, or a percentage such as 50%."""

from __future__ import annotations

import math
import re
import struct
from typing import Optional

from .number import _format_float

_FRACTION_RE = re.compile(r"([0-9.-]+)(%)?")


def _to_single(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"value out of range: {value!r}") from exc


def _shortest_single(value: float) -> str:
    for precision in range(9):
        text = f"{value:.{precision}e}"
        if _to_single(float(text)) == value:
            return text
    return repr(value)


def parse_fraction(text: str) -> float:
    """Parse a fraction; a percentage is turned into its share of one.

    Text that does not look like a fraction yields 0.0, the unset value.
    Raises ValueError for malformed numbers.
    """
    match = _FRACTION_RE.fullmatch(text)
    if match is None:
        return 0.0

    digits, percent = match.groups()
    try:
        value = float(digits)
    except ValueError as exc:
        raise ValueError(f"invalid fraction: {text!r}") from exc

    value = _to_single(value)
    if math.isinf(value):
        raise ValueError(f"fraction out of range: {text!r}")

    if percent:
        value = value / 100
    return _to_single(value)


def format_fraction(value: float) -> Optional[str]:
    """Attribute text for a fraction, or None when it is zero (unset)."""
    if value == 0:
        return None
    return _format_float(_to_single(value), shortest=_shortest_single)